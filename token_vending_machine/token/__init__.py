"""Token entity, status derivation and value generators."""

from .source import RandomHexTokens, RandomUUIDTokens, TokenSource
from .types import Token, TokenStatus, default_token_name, is_expired, status_of

__all__ = [
    "Token",
    "TokenStatus",
    "TokenSource",
    "RandomUUIDTokens",
    "RandomHexTokens",
    "default_token_name",
    "is_expired",
    "status_of",
]
