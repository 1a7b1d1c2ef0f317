from __future__ import annotations

from typing import cast

from sqlalchemy.sql.schema import Table

from esantiye.models.document import Document
from esantiye.models.material import Material
from esantiye.models.personnel import Personnel
from esantiye.models.project import Project
from esantiye.models.safety_incident import SafetyIncident
from esantiye.models.task import Task
from esantiye.models.transaction import Transaction
from esantiye.models.user import User

# Creation order follows foreign-key declaration order.
SCHEMA_MODELS = (
    User,
    Project,
    Material,
    Personnel,
    SafetyIncident,
    Transaction,
    Task,
    Document,
)

SCHEMA_TABLES: tuple[Table, ...] = tuple(
    cast(Table, model.__table__)  # type: ignore[attr-defined]
    for model in SCHEMA_MODELS
)

__all__ = [
    "SCHEMA_MODELS",
    "SCHEMA_TABLES",
    "Document",
    "Material",
    "Personnel",
    "Project",
    "SafetyIncident",
    "Task",
    "Transaction",
    "User",
]
