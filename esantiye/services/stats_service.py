from __future__ import annotations

from esantiye.core.db import Database
from esantiye.resources import STATS_RESOURCES


def compute_stats(db: Database) -> dict[str, dict[str, int]]:
    # Each count runs on its own; a write in between may show in one and not another.
    stats: dict[str, dict[str, int]] = {}
    for spec in STATS_RESOURCES:
        row = db.query_one(f"SELECT COUNT(*) AS c FROM {spec.table}")
        stats[spec.key] = {"total": int(row["c"]) if row else 0}
    return stats
