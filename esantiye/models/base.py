from __future__ import annotations

from typing import Any

import sqlalchemy as sa
from sqlmodel import Field

# Every table keeps SQLite's AUTOINCREMENT so ids are never reused.
TABLE_ARGS: dict[str, Any] = {"sqlite_autoincrement": True}


def server_default(value: str | int, **kwargs: Any) -> Any:
    """Column whose default lives in the DDL, so raw INSERTs pick it up."""
    default = sa.text(str(value)) if isinstance(value, int) else value
    return Field(
        default=None,
        sa_column_kwargs={"server_default": default},
        **kwargs,
    )


def timestamp() -> Any:
    """Creation time stamped by the database; never refreshed."""
    return Field(
        default=None,
        sa_column_kwargs={"server_default": sa.func.current_timestamp()},
    )
