"""Per-entity descriptions consumed by the generic list/create operations.

Table and column names used to build SQL only ever come from this module.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ResourceSpec:
    key: str
    table: str
    required: tuple[str, ...]
    order_by: str | None = None
    creatable: bool = False
    created_message: str | None = None

    @property
    def label(self) -> str:
        return self.key.rstrip("s").replace("_", " ")


PROJECTS = ResourceSpec(
    key="projects",
    table="projects",
    required=("name",),
    # created_at only has second resolution; id breaks the tie
    order_by="created_at DESC, id DESC",
    creatable=True,
    created_message="Project created",
)
MATERIALS = ResourceSpec(
    key="materials",
    table="materials",
    required=("name",),
    creatable=True,
)
PERSONNEL = ResourceSpec(
    key="personnel",
    table="personnel",
    required=("name",),
    creatable=True,
)
TASKS = ResourceSpec(
    key="tasks",
    table="tasks",
    required=("project_id", "title"),
)
TRANSACTIONS = ResourceSpec(
    key="transactions",
    table="transactions",
    required=("type", "amount"),
)

RESOURCES: tuple[ResourceSpec, ...] = (
    PROJECTS,
    MATERIALS,
    PERSONNEL,
    TASKS,
    TRANSACTIONS,
)

STATS_RESOURCES: tuple[ResourceSpec, ...] = (PROJECTS, MATERIALS, PERSONNEL, TASKS)
