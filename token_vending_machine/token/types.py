"""Token datatypes and expiry computation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenStatus(str, Enum):
    """Derived classification of a token value, never persisted."""

    NOT_FOUND = "NOT_FOUND"
    EXPIRED = "EXPIRED"
    VALID = "VALID"


@dataclass(frozen=True)
class Token:
    """One issued bearer credential."""

    name: str
    value: str
    owner_id: str
    created_at_ms: int
    lifetime_ms: int

    @property
    def expires_at_ms(self) -> int:
        return self.created_at_ms + self.lifetime_ms

    def is_expired(self, now_ms: int) -> bool:
        return is_expired(self, now_ms)


def is_expired(token: Token, now_ms: int) -> bool:
    """A token is expired from the instant ``created_at_ms + lifetime_ms`` onward."""
    return now_ms >= token.expires_at_ms


def status_of(token: Token | None, now_ms: int) -> TokenStatus:
    """Classify an optional lookup result against a single clock sample."""
    if token is None:
        return TokenStatus.NOT_FOUND
    if is_expired(token, now_ms):
        return TokenStatus.EXPIRED
    return TokenStatus.VALID


def default_token_name(owner_id: str, created_at_ms: int) -> str:
    return f"{owner_id}-{created_at_ms}"
