from __future__ import annotations

from datetime import datetime

from sqlmodel import Field, SQLModel

from esantiye.models.base import TABLE_ARGS, timestamp


class Document(SQLModel, table=True):
    __tablename__ = "documents"
    __table_args__ = TABLE_ARGS

    id: int | None = Field(default=None, primary_key=True)
    project_id: int | None = Field(default=None, foreign_key="projects.id")
    title: str
    file_path: str | None = None
    file_type: str | None = None
    uploaded_by: int | None = Field(default=None, foreign_key="users.id")
    created_at: datetime | None = timestamp()
