"""
Connection provider for the users store.

One pooled SQLAlchemy engine per process. Handlers never touch the engine
directly; they go through ``Database.execute`` (mutations) and
``Database.query`` / ``Database.query_one`` (reads), which check a connection
out of the pool for the duration of a single statement.
"""

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any, NamedTuple

from sqlalchemy import Engine, Row, create_engine, text
from sqlalchemy.engine import Result
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import Settings

logger = logging.getLogger(__name__)

Params = Mapping[str, Any] | None


class ExecResult(NamedTuple):
    rowcount: int
    lastrowid: int | None  # generated id for INSERT; driver-defined otherwise


def create_db_engine(settings: Settings) -> Engine:
    """
    Build the pooled engine from settings.

    ``DB_MAX_IDLE_CONNS`` connections are kept in the pool, and up to
    ``DB_MAX_OPEN_CONNS - DB_MAX_IDLE_CONNS`` more may be opened under load.
    Connections older than ``DB_CONN_MAX_LIFETIME`` are recycled on checkout.
    """
    return create_engine(
        settings.database_url,
        pool_size=settings.DB_MAX_IDLE_CONNS,
        max_overflow=settings.DB_MAX_OPEN_CONNS - settings.DB_MAX_IDLE_CONNS,
        pool_recycle=settings.DB_CONN_MAX_LIFETIME,
        connect_args={"connect_timeout": settings.DB_CONNECT_TIMEOUT},
    )


class Database:
    """Pooled handle to the relational store."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(create_db_engine(settings))

    @property
    def engine(self) -> Engine:
        return self._engine

    def ping(self) -> None:
        """Run SELECT 1; raises SQLAlchemyError when the store is unreachable."""
        with self._engine.connect() as conn:
            conn.execute(text("SELECT 1")).scalar_one()

    def is_alive(self) -> bool:
        try:
            self.ping()
        except SQLAlchemyError as e:
            logger.warning("Store ping failed: %s", e)
            return False
        return True

    def execute(self, sql: str, params: Params = None) -> ExecResult:
        """Run one mutation in its own transaction and report what it changed."""
        with self._engine.begin() as conn:
            result = conn.execute(text(sql), dict(params or {}))
            return ExecResult(rowcount=result.rowcount, lastrowid=result.lastrowid)

    @contextmanager
    def query(self, sql: str, params: Params = None) -> Iterator[Result[Any]]:
        """
        Yield the cursor for a read.

        The cursor and its pooled connection are released when the block
        exits, whether it finishes normally or raises mid-iteration.
        """
        with self._engine.connect() as conn:
            result = conn.execute(text(sql), dict(params or {}))
            try:
                yield result
            finally:
                result.close()

    def query_one(self, sql: str, params: Params = None) -> Row[Any] | None:
        """Return the single matching row, or None when nothing matches."""
        with self.query(sql, params) as result:
            return result.first()

    def dispose(self) -> None:
        self._engine.dispose()


def init_db(database: Database) -> None:
    """Fail fast when the store is unreachable at startup."""
    try:
        database.ping()
    except SQLAlchemyError:
        logger.error("Store ping failed at startup")
        raise
    logger.info("Connected to store")
