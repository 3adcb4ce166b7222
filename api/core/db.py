"""
Async read-only database access (raw SQL) using asyncpg.

`Database` owns the connection pool. `main.create_app` constructs one
instance, stores it on `app.state.db`, opens it on startup and closes it on
shutdown. Routes receive it through `core.dependencies.get_db`.

Queries never raise driver exceptions to their callers. They return an
explicit outcome instead:
- `Fetched(value)` on success (`value` is a row list, or one row / None)
- `Failed(error)` when the store is unreachable or the statement fails

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import asyncpg

from . import settings
from .errors import DataSourceError

logger = logging.getLogger(__name__)

T = TypeVar("T")

SQL_LOG_CHARS = 200

_DRIVER_ERRORS = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    OSError,
    asyncio.TimeoutError,
)


@dataclass(frozen=True)
class Fetched(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failed:
    error: DataSourceError


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


def _sql_excerpt(sql: str) -> str:
    return " ".join(sql.split())[:SQL_LOG_CHARS]


def _failure(sql: str, detail: str) -> Failed:
    return Failed(DataSourceError(f"{detail} (sql: {_sql_excerpt(sql)})"))


class Database:
    def __init__(
        self,
        dsn: str | None,
        *,
        min_size: int = 1,
        max_size: int = 5,
        command_timeout: float = 30,
    ) -> None:
        self.dsn = dsn
        self.min_size = min_size
        self.max_size = max_size
        self.command_timeout = command_timeout
        self._pool: asyncpg.Pool | None = None

    @classmethod
    def from_env(cls) -> "Database":
        return cls(
            settings.database_url(),
            min_size=settings.pool_min_size(),
            max_size=settings.pool_max_size(),
            command_timeout=settings.command_timeout(),
        )

    @property
    def is_connected(self) -> bool:
        return self._pool is not None

    async def connect(self) -> None:
        if self._pool is not None:
            return None
        if not self.dsn:
            raise RuntimeError("DATABASE_URL is not set.")
        self._pool = await asyncpg.create_pool(
            dsn=self.dsn,
            min_size=self.min_size,
            max_size=self.max_size,
            command_timeout=self.command_timeout,
            # Every session is read-only; this service never writes.
            server_settings={"default_transaction_read_only": "on"},
        )
        logger.info("db_pool_opened min_size=%s max_size=%s", self.min_size, self.max_size)

    async def close(self) -> None:
        if self._pool is None:
            return None
        await self._pool.close()
        self._pool = None
        logger.info("db_pool_closed")

    async def fetch_all(self, sql: str, *args: Any) -> Fetched[list[dict[str, Any]]] | Failed:
        """
        Run a query and return all rows as a list of dicts.
        """
        if self._pool is None:
            return _failure(sql, "database pool is not open")
        try:
            rows = await self._pool.fetch(sql, *args)
        except _DRIVER_ERRORS as exc:
            logger.exception("query_failed kind=fetch_all sql=%s", _sql_excerpt(sql))
            return _failure(sql, f"{type(exc).__name__}: {exc}")
        return Fetched([_record_to_dict(r) for r in rows])

    async def fetch_one(self, sql: str, *args: Any) -> Fetched[dict[str, Any] | None] | Failed:
        """
        Run a query and return a single row as a dict (or None when nothing matches).
        """
        if self._pool is None:
            return _failure(sql, "database pool is not open")
        try:
            row = await self._pool.fetchrow(sql, *args)
        except _DRIVER_ERRORS as exc:
            logger.exception("query_failed kind=fetch_one sql=%s", _sql_excerpt(sql))
            return _failure(sql, f"{type(exc).__name__}: {exc}")
        return Fetched(_record_to_dict(row) if row is not None else None)
