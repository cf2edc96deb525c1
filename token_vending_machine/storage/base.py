"""Abstract token repository interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ..token.types import Token


class TokensRepository(ABC):
    """Storage backend owning the lifetime of :class:`Token` records.

    Implementations must give read-your-write consistency per owner: a
    ``create`` followed by ``find_by_owner`` for the same owner observes the
    new record.
    """

    @abstractmethod
    async def create(
        self, *, owner_id: str, lifetime_ms: int, value: str, name: Optional[str] = None
    ) -> Token:
        """Persist a new token, stamping its creation time.

        Without ``name`` the token is named ``<owner_id>-<created_at_ms>`` from
        the same timestamp that is stored.
        """

    @abstractmethod
    async def find_by_value(self, value: str) -> Optional[Token]:
        """Fetch a token by its value, or ``None``."""

    @abstractmethod
    async def find_by_owner(self, owner_id: str) -> list[Token]:
        """List an owner's tokens in creation order."""

    @abstractmethod
    async def revoke(self, value: str) -> None:
        """Delete a token. Revoking an absent value is not an error."""

    async def close(self) -> None:
        """Close backend resources if needed."""
