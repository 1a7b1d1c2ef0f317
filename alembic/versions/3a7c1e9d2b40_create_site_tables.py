"""create site tables

Revision ID: 3a7c1e9d2b40
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""

from collections.abc import Sequence
from typing import Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3a7c1e9d2b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id() -> sa.Column:
    return sa.Column("id", sa.Integer(), nullable=False)


def _timestamp(name: str) -> sa.Column:
    return sa.Column(name, sa.DateTime(), server_default=sa.func.current_timestamp())


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "users",
        _id(),
        sa.Column("username", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("password", sa.String(), nullable=False),
        sa.Column("role", sa.String(), nullable=False, server_default="worker"),
        sa.Column("status", sa.String(), server_default="active"),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
        sa.UniqueConstraint("email"),
        sqlite_autoincrement=True,
    )
    op.create_table(
        "projects",
        _id(),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("location", sa.String()),
        sa.Column("type", sa.String()),
        sa.Column("priority", sa.String()),
        sa.Column("start_date", sa.String()),
        sa.Column("end_date", sa.String()),
        sa.Column("budget", sa.Float()),
        sa.Column("duration", sa.Integer()),
        sa.Column("progress", sa.Integer(), server_default=sa.text("0")),
        sa.Column("status", sa.String(), server_default="planning"),
        sa.Column("description", sa.String()),
        sa.Column("created_by", sa.Integer()),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(["created_by"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
        sqlite_autoincrement=True,
    )
    op.create_table(
        "materials",
        _id(),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("category", sa.String()),
        sa.Column("unit", sa.String()),
        sa.Column("stockQuantity", sa.Integer(), server_default=sa.text("0")),
        sa.Column("minStock", sa.Integer(), server_default=sa.text("0")),
        sa.Column("unitPrice", sa.Float()),
        sa.Column("supplier", sa.String()),
        sa.Column("description", sa.String()),
        sa.Column("barcode", sa.String()),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sqlite_autoincrement=True,
    )
    op.create_table(
        "personnel",
        _id(),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("position", sa.String()),
        sa.Column("tcKimlik", sa.String()),
        sa.Column("salary", sa.Float()),
        sa.Column("joinDate", sa.String()),
        sa.Column("status", sa.String(), server_default="active"),
        sa.Column("contact", sa.String()),
        sa.Column("email", sa.String()),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("tcKimlik"),
        sqlite_autoincrement=True,
    )
    op.create_table(
        "safety_incidents",
        _id(),
        sa.Column("date", sa.String(), nullable=False),
        sa.Column("type", sa.String()),
        sa.Column("description", sa.String()),
        sa.Column("personnelId", sa.Integer()),
        sa.Column("severity", sa.String()),
        sa.Column("status", sa.String(), server_default="open"),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["personnelId"], ["personnel.id"]),
        sa.PrimaryKeyConstraint("id"),
        sqlite_autoincrement=True,
    )
    op.create_table(
        "transactions",
        _id(),
        sa.Column("project_id", sa.Integer()),
        sa.Column("type", sa.String(), nullable=False),
        sa.Column("amount", sa.Float(), nullable=False),
        sa.Column("currency", sa.String(), server_default="TL"),
        sa.Column("description", sa.String()),
        sa.Column("category", sa.String()),
        sa.Column("date", sa.String()),
        sa.Column("created_by", sa.Integer()),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"]),
        sa.ForeignKeyConstraint(["created_by"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
        sqlite_autoincrement=True,
    )
    op.create_table(
        "tasks",
        _id(),
        sa.Column("project_id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("description", sa.String()),
        sa.Column("assigned_to", sa.Integer()),
        sa.Column("status", sa.String(), server_default="pending"),
        sa.Column("priority", sa.String(), server_default="medium"),
        sa.Column("start_date", sa.String()),
        sa.Column("end_date", sa.String()),
        sa.Column("progress", sa.Integer(), server_default=sa.text("0")),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"]),
        sa.ForeignKeyConstraint(["assigned_to"], ["personnel.id"]),
        sa.PrimaryKeyConstraint("id"),
        sqlite_autoincrement=True,
    )
    op.create_table(
        "documents",
        _id(),
        sa.Column("project_id", sa.Integer()),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("file_path", sa.String()),
        sa.Column("file_type", sa.String()),
        sa.Column("uploaded_by", sa.Integer()),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"]),
        sa.ForeignKeyConstraint(["uploaded_by"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    """Downgrade schema."""
    for table in (
        "documents",
        "tasks",
        "transactions",
        "safety_incidents",
        "personnel",
        "materials",
        "projects",
        "users",
    ):
        op.drop_table(table)
