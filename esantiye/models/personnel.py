from __future__ import annotations

from datetime import datetime

from sqlmodel import Field, SQLModel

from esantiye.models.base import TABLE_ARGS, server_default, timestamp


class Personnel(SQLModel, table=True):
    __tablename__ = "personnel"
    __table_args__ = TABLE_ARGS

    id: int | None = Field(default=None, primary_key=True)
    name: str
    position: str | None = None
    # national ID; NULLs don't collide with each other
    tcKimlik: str | None = Field(default=None, unique=True)  # noqa: N815
    salary: float | None = None
    joinDate: str | None = None  # noqa: N815
    status: str | None = server_default("active")
    contact: str | None = None
    email: str | None = None
    created_at: datetime | None = timestamp()
    updated_at: datetime | None = timestamp()
