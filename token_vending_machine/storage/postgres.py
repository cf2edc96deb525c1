"""Postgres-backed token repository using asyncpg."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable, Optional

import asyncpg

from ..errors import DuplicateTokenError, RepositoryError
from ..token.types import Token, default_token_name
from ..utils.time import now_ms
from .base import TokensRepository

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS tokens (
    value TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    owner_id TEXT NOT NULL,
    created_at_ms BIGINT NOT NULL,
    lifetime_ms BIGINT NOT NULL CHECK (lifetime_ms > 0)
);
CREATE INDEX IF NOT EXISTS tokens_owner_id_idx ON tokens (owner_id, created_at_ms);
"""

SELECT_COLUMNS = "name, value, owner_id, created_at_ms, lifetime_ms"


def _row_to_token(row: asyncpg.Record) -> Token:
    return Token(
        name=row["name"],
        value=row["value"],
        owner_id=row["owner_id"],
        created_at_ms=int(row["created_at_ms"]),
        lifetime_ms=int(row["lifetime_ms"]),
    )


class PostgresTokensRepository(TokensRepository):
    """Token repository persisting into PostgreSQL through an asyncpg pool."""

    def __init__(
        self,
        dsn: Optional[str] = None,
        *,
        pool: Optional[asyncpg.Pool] = None,
        min_size: int = 1,
        max_size: int = 4,
        clock: Optional[Callable[[], int]] = None,
    ) -> None:
        self.dsn = dsn
        self.pool = pool
        self.min_size = min_size
        self.max_size = max_size
        self.clock = clock or now_ms
        self._schema_ready = False

    async def connect(self) -> None:
        """Create the pool if one was not supplied and ensure the schema exists."""
        if self.pool is None:
            if not self.dsn:
                raise ValueError("Either `dsn` or `pool` must be provided for PostgresTokensRepository.")
            self.pool = await asyncpg.create_pool(dsn=self.dsn, min_size=self.min_size, max_size=self.max_size)
        if not self._schema_ready:
            async with self.pool.acquire() as conn:
                await conn.execute(SCHEMA_SQL)
            self._schema_ready = True

    async def close(self) -> None:
        if self.pool is not None:
            await self.pool.close()
            self.pool = None
            self._schema_ready = False

    @asynccontextmanager
    async def _connection(self) -> AsyncIterator[asyncpg.Connection]:
        try:
            await self.connect()
            assert self.pool is not None
            async with self.pool.acquire() as conn:
                yield conn
        except (asyncpg.PostgresError, OSError) as exc:
            raise RepositoryError(str(exc)) from exc

    async def create(
        self, *, owner_id: str, lifetime_ms: int, value: str, name: Optional[str] = None
    ) -> Token:
        created_at_ms = self.clock()
        token = Token(
            name=name or default_token_name(owner_id, created_at_ms),
            value=value,
            owner_id=owner_id,
            created_at_ms=created_at_ms,
            lifetime_ms=lifetime_ms,
        )
        try:
            async with self._connection() as conn:
                await conn.execute(
                    """
                    INSERT INTO tokens (value, name, owner_id, created_at_ms, lifetime_ms)
                    VALUES ($1, $2, $3, $4, $5)
                    """,
                    token.value,
                    token.name,
                    token.owner_id,
                    token.created_at_ms,
                    token.lifetime_ms,
                )
        except RepositoryError as exc:
            if isinstance(exc.__cause__, asyncpg.UniqueViolationError):
                raise DuplicateTokenError(value) from exc.__cause__
            raise
        return token

    async def find_by_value(self, value: str) -> Optional[Token]:
        async with self._connection() as conn:
            row = await conn.fetchrow(f"SELECT {SELECT_COLUMNS} FROM tokens WHERE value=$1", value)
            return _row_to_token(row) if row else None

    async def find_by_owner(self, owner_id: str) -> list[Token]:
        async with self._connection() as conn:
            rows = await conn.fetch(
                f"SELECT {SELECT_COLUMNS} FROM tokens WHERE owner_id=$1 ORDER BY created_at_ms, value",
                owner_id,
            )
            return [_row_to_token(row) for row in rows]

    async def revoke(self, value: str) -> None:
        async with self._connection() as conn:
            await conn.execute("DELETE FROM tokens WHERE value=$1", value)

    async def all(self) -> list[Token]:
        async with self._connection() as conn:
            rows = await conn.fetch(f"SELECT {SELECT_COLUMNS} FROM tokens ORDER BY created_at_ms, value")
            return [_row_to_token(row) for row in rows]
