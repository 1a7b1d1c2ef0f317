from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from esantiye.core.db import Database, Row
from esantiye.core.errors import DatabaseError, ValidationError
from esantiye.resources import ResourceSpec

logger = logging.getLogger(__name__)


def list_rows(db: Database, spec: ResourceSpec) -> list[Row]:
    sql = f"SELECT * FROM {spec.table}"
    if spec.order_by:
        sql += f" ORDER BY {spec.order_by}"
    return db.query_many(sql)


def _is_blank(value: Any) -> bool:
    # null, false, 0, "" and NaN count as missing; lists and objects do not
    if value is None:
        return True
    if isinstance(value, (str, int, float)):
        return not value or value != value
    return False


def validate_required(spec: ResourceSpec, payload: Mapping[str, Any]) -> None:
    for field in spec.required:
        if _is_blank(payload.get(field)):
            raise ValidationError(f"{spec.label.capitalize()} {field} is required.")


def create_row(db: Database, spec: ResourceSpec, payload: Mapping[str, Any]) -> int:
    """Insert only the mandatory fields; everything else takes its default."""
    validate_required(spec, payload)

    columns = ", ".join(spec.required)
    placeholders = ", ".join(f":{field}" for field in spec.required)
    result = db.execute(
        f"INSERT INTO {spec.table} ({columns}) VALUES ({placeholders})",
        {field: payload[field] for field in spec.required},
    )
    if result.last_id is None:
        raise DatabaseError(f"insert into {spec.table} returned no identifier")

    logger.info("created %s row id=%s", spec.table, result.last_id)
    return result.last_id
