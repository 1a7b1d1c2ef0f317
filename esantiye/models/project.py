from __future__ import annotations

from datetime import datetime

from sqlmodel import Field, SQLModel

from esantiye.models.base import TABLE_ARGS, server_default, timestamp


class Project(SQLModel, table=True):
    __tablename__ = "projects"
    __table_args__ = TABLE_ARGS

    id: int | None = Field(default=None, primary_key=True)
    name: str
    location: str | None = None
    type: str | None = None
    priority: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    budget: float | None = None
    duration: int | None = None
    # 0-100 expected, not enforced
    progress: int | None = server_default(0)
    status: str | None = server_default("planning")
    description: str | None = None
    created_by: int | None = Field(default=None, foreign_key="users.id")
    created_at: datetime | None = timestamp()
    updated_at: datetime | None = timestamp()
