from __future__ import annotations

from datetime import datetime

from sqlmodel import Field, SQLModel

from esantiye.models.base import TABLE_ARGS, server_default, timestamp


class Task(SQLModel, table=True):
    __tablename__ = "tasks"
    __table_args__ = TABLE_ARGS

    id: int | None = Field(default=None, primary_key=True)
    project_id: int = Field(foreign_key="projects.id")
    title: str
    description: str | None = None
    assigned_to: int | None = Field(default=None, foreign_key="personnel.id")
    status: str | None = server_default("pending")
    priority: str | None = server_default("medium")
    start_date: str | None = None
    end_date: str | None = None
    progress: int | None = server_default(0)
    created_at: datetime | None = timestamp()
    updated_at: datetime | None = timestamp()
