from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Annotated, Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

# Allow selecting which .env to read (host vs docker)
ENV_FILE = os.environ.get(
    "ENV_FILE",
    str(Path(__file__).resolve().parent.parent / ".env"),
)


def parse_origins(raw: Any) -> list[str]:
    """CORS_ALLOW_ORIGINS as a JSON list, a comma list, or "*" (also when blank)."""
    if isinstance(raw, str):
        text = raw.strip()
        items: Any = None
        if text.startswith("["):
            try:
                items = json.loads(text)
            except ValueError:
                items = None
        if not isinstance(items, list):
            items = text.split(",")
    elif isinstance(raw, (list, tuple)):
        items = list(raw)
    else:
        items = []
    origins = [str(item).strip() for item in items if str(item).strip()]
    return origins or ["*"]


class Settings(BaseSettings):
    # ---- App ----
    app_name: str = "e-Şantiye API"
    env: str = "development"
    debug: bool = True
    api_prefix: str = "/api"

    # ---- DB ----
    db_path: str = "./esantiye.db"
    database_url: str | None = None
    sqlite_foreign_keys: bool = False

    # ---- Server ----
    host: str = "127.0.0.1"
    port: int = 3000

    # ---- Other ----
    log_level: str = "info"
    cors_allow_origins: Annotated[list[str], NoDecode] = ["http://localhost:3001"]

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("cors_allow_origins", mode="before")
    @classmethod
    def _parse_cors(cls, v: Any) -> list[str]:
        return parse_origins(v)

    @property
    def sqlalchemy_url(self) -> str:
        """DATABASE_URL wins; otherwise DB_PATH is opened as a SQLite file."""
        if self.database_url:
            return self.database_url
        return f"sqlite:///{self.db_path}"


settings = Settings()
