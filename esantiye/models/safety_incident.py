from __future__ import annotations

from datetime import datetime

from sqlmodel import Field, SQLModel

from esantiye.models.base import TABLE_ARGS, server_default, timestamp


class SafetyIncident(SQLModel, table=True):
    __tablename__ = "safety_incidents"
    __table_args__ = TABLE_ARGS

    id: int | None = Field(default=None, primary_key=True)
    date: str
    type: str | None = None
    description: str | None = None
    personnelId: int | None = Field(  # noqa: N815
        default=None,
        foreign_key="personnel.id",
    )
    severity: str | None = None
    status: str | None = server_default("open")
    created_at: datetime | None = timestamp()
