from __future__ import annotations

from datetime import datetime

from sqlmodel import Field, SQLModel

from esantiye.models.base import TABLE_ARGS, server_default, timestamp


class User(SQLModel, table=True):
    __tablename__ = "users"
    __table_args__ = TABLE_ARGS

    id: int | None = Field(default=None, primary_key=True)
    username: str = Field(unique=True)
    email: str = Field(unique=True)
    password: str
    # role/status are stored but no endpoint enforces them
    role: str | None = server_default("worker", nullable=False)
    status: str | None = server_default("active")
    created_at: datetime | None = timestamp()
    updated_at: datetime | None = timestamp()
