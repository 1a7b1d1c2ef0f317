from __future__ import annotations

from datetime import datetime

from sqlmodel import Field, SQLModel

from esantiye.models.base import TABLE_ARGS, server_default, timestamp


class Transaction(SQLModel, table=True):
    __tablename__ = "transactions"
    __table_args__ = TABLE_ARGS

    id: int | None = Field(default=None, primary_key=True)
    project_id: int | None = Field(default=None, foreign_key="projects.id")
    type: str
    amount: float
    currency: str | None = server_default("TL")
    description: str | None = None
    category: str | None = None
    date: str | None = None
    created_by: int | None = Field(default=None, foreign_key="users.id")
    created_at: datetime | None = timestamp()
