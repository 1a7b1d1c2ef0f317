from __future__ import annotations

from datetime import datetime

from sqlmodel import Field, SQLModel

from esantiye.models.base import TABLE_ARGS, server_default, timestamp


class Material(SQLModel, table=True):
    __tablename__ = "materials"
    __table_args__ = TABLE_ARGS

    id: int | None = Field(default=None, primary_key=True)
    name: str
    category: str | None = None
    unit: str | None = None
    stockQuantity: int | None = server_default(0)  # noqa: N815
    minStock: int | None = server_default(0)  # noqa: N815
    unitPrice: float | None = None  # noqa: N815
    supplier: str | None = None
    description: str | None = None
    barcode: str | None = None
    created_at: datetime | None = timestamp()
    updated_at: datetime | None = timestamp()
