"""Token repository implementations."""

from __future__ import annotations

import os

from .base import TokensRepository
from .memory import InMemoryTokensRepository

__all__ = ["TokensRepository", "InMemoryTokensRepository", "PostgresTokensRepository", "create_repository_from_env"]


def __getattr__(name: str):
    if name == "PostgresTokensRepository":
        from .postgres import PostgresTokensRepository

        return PostgresTokensRepository
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def create_repository_from_env() -> TokensRepository:
    """Create Postgres storage if env configured, otherwise in-memory."""
    dsn = os.getenv("TVM_PG_DSN") or os.getenv("DATABASE_URL")
    if dsn:
        from .postgres import PostgresTokensRepository

        return PostgresTokensRepository(dsn=dsn)
    return InMemoryTokensRepository()
