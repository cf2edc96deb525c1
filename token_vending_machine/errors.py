"""Exception hierarchy raised by concrete adapters."""

from __future__ import annotations


class TokenVendingError(Exception):
    """Base class for backend failures surfaced to the orchestrator."""


class RepositoryError(TokenVendingError):
    """A storage backend could not complete an operation."""


class DuplicateTokenError(RepositoryError):
    """A token with the same value is already stored."""

    def __init__(self, value: str) -> None:
        super().__init__("token value already exists")
        self.value = value
