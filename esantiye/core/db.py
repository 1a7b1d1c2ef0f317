"""Data access layer.

:class:`Database` is the only owner of the database connection. Handlers reach
it through :func:`get_database`, which reads the instance the application was
built with, so tests can hand every case its own in-memory store.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from enum import Enum
from typing import Any, NamedTuple

from fastapi import Request
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool
from sqlalchemy.schema import CreateTable

from esantiye.core.errors import DatabaseError, NotInitializedError
from esantiye.models import SCHEMA_TABLES

logger = logging.getLogger(__name__)

Row = dict[str, Any]
Params = Mapping[str, Any]


class DatabaseState(str, Enum):
    uninitialized = "uninitialized"
    connected = "connected"
    schema_ready = "schema_ready"


class MutationResult(NamedTuple):
    last_id: int | None
    rowcount: int


def _driver_message(err: SQLAlchemyError) -> str:
    orig = getattr(err, "orig", None)
    return str(orig) if orig is not None else str(err)


class Database:
    def __init__(self, url: str, *, sqlite_foreign_keys: bool = False) -> None:
        self.url = url
        self.sqlite_foreign_keys = sqlite_foreign_keys
        self._engine: Engine | None = None
        self._state = DatabaseState.uninitialized
        # Statements queue on the single connection, one at a time.
        self._lock = threading.Lock()

    @property
    def state(self) -> DatabaseState:
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._state is DatabaseState.schema_ready

    def _create_engine(self) -> Engine:
        if not self.url.startswith("sqlite"):
            return create_engine(self.url, pool_size=1, max_overflow=0)

        # One DBAPI connection for the whole process, shared across threads.
        engine = create_engine(
            self.url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        if self.sqlite_foreign_keys:

            @event.listens_for(engine, "connect")
            def _enable_foreign_keys(dbapi_connection: Any, _record: Any) -> None:
                cursor = dbapi_connection.cursor()
                cursor.execute("PRAGMA foreign_keys=ON")
                cursor.close()

        return engine

    def connect(self) -> None:
        if self._engine is not None:
            return
        engine = self._create_engine()
        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as err:
            engine.dispose()
            message = _driver_message(err)
            logger.error("database connection failed: %s", message)
            raise DatabaseError(message) from err

        self._engine = engine
        self._state = DatabaseState.connected
        logger.info("connected to database: %s", engine.url)

    def init_schema(self) -> None:
        """Issue one CREATE TABLE IF NOT EXISTS per table, parents first."""
        engine = self._require_engine()
        try:
            with self._lock, engine.begin() as conn:
                for table in SCHEMA_TABLES:
                    conn.execute(CreateTable(table, if_not_exists=True))
        except SQLAlchemyError as err:
            message = _driver_message(err)
            logger.error("schema creation failed: %s", message)
            raise DatabaseError(message) from err

        self._state = DatabaseState.schema_ready
        logger.info("database tables checked/created (%d)", len(SCHEMA_TABLES))

    def close(self) -> None:
        with self._lock:
            if self._engine is not None:
                self._engine.dispose()
        self._engine = None
        self._state = DatabaseState.uninitialized

    def _require_engine(self) -> Engine:
        if self._engine is None:
            raise NotInitializedError("Database not connected. Call connect() first.")
        return self._engine

    def _require_ready(self) -> Engine:
        engine = self._require_engine()
        if not self.is_ready:
            raise NotInitializedError("Database not initialized")
        return engine

    def query_many(self, sql: str, params: Params | None = None) -> list[Row]:
        engine = self._require_ready()
        try:
            with self._lock, engine.connect() as conn:
                result = conn.execute(text(sql), dict(params or {}))
                return [dict(row._mapping) for row in result]
        except SQLAlchemyError as err:
            message = _driver_message(err)
            logger.error("query failed: %s", message)
            raise DatabaseError(message) from err

    def query_one(self, sql: str, params: Params | None = None) -> Row | None:
        engine = self._require_ready()
        try:
            with self._lock, engine.connect() as conn:
                row = conn.execute(text(sql), dict(params or {})).first()
        except SQLAlchemyError as err:
            message = _driver_message(err)
            logger.error("query failed: %s", message)
            raise DatabaseError(message) from err
        return dict(row._mapping) if row is not None else None

    def execute(self, sql: str, params: Params | None = None) -> MutationResult:
        engine = self._require_ready()
        try:
            with self._lock, engine.begin() as conn:
                result = conn.execute(text(sql), dict(params or {}))
                return MutationResult(
                    last_id=result.lastrowid,
                    rowcount=result.rowcount,
                )
        except SQLAlchemyError as err:
            message = _driver_message(err)
            logger.error("statement failed: %s", message)
            raise DatabaseError(message) from err


def get_database(request: Request) -> Database:
    return request.app.state.database  # type: ignore[no-any-return]
