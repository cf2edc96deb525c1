"""In-memory token repository."""

from __future__ import annotations

from typing import Callable, Optional

from ..errors import DuplicateTokenError
from ..token.types import Token, default_token_name
from ..utils.time import now_ms
from .base import TokensRepository


class InMemoryTokensRepository(TokensRepository):
    """Process-local repository; records live as long as the instance."""

    def __init__(self, *, clock: Optional[Callable[[], int]] = None) -> None:
        self.clock = clock or now_ms
        self.tokens: dict[str, Token] = {}

    async def create(
        self, *, owner_id: str, lifetime_ms: int, value: str, name: Optional[str] = None
    ) -> Token:
        if value in self.tokens:
            raise DuplicateTokenError(value)
        created_at_ms = self.clock()
        token = Token(
            name=name or default_token_name(owner_id, created_at_ms),
            value=value,
            owner_id=owner_id,
            created_at_ms=created_at_ms,
            lifetime_ms=lifetime_ms,
        )
        self.tokens[value] = token
        return token

    async def find_by_value(self, value: str) -> Optional[Token]:
        return self.tokens.get(value)

    async def find_by_owner(self, owner_id: str) -> list[Token]:
        return [token for token in self.tokens.values() if token.owner_id == owner_id]

    async def revoke(self, value: str) -> None:
        self.tokens.pop(value, None)

    async def all(self) -> list[Token]:
        return list(self.tokens.values())

    def put(self, token: Token) -> None:
        """Store a fully-formed token as-is, keeping its creation time."""
        self.tokens[token.value] = token
