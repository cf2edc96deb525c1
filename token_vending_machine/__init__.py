"""Token vending machine package.

Issues, lists and revokes short-lived bearer tokens for allow-listed chat
users, independent of the chat transport and the storage backend.
"""

from .access import AllowedIds, AllowedUsers
from .chat import LocalChannel, MessageChannel
from .config import VendingConfig
from .machine import TokenVendingMachine
from .storage import InMemoryTokensRepository, TokensRepository, create_repository_from_env
from .token import RandomHexTokens, RandomUUIDTokens, Token, TokenSource, TokenStatus

__all__ = [
    "TokenVendingMachine",
    "VendingConfig",
    "Token",
    "TokenStatus",
    "TokenSource",
    "RandomUUIDTokens",
    "RandomHexTokens",
    "TokensRepository",
    "InMemoryTokensRepository",
    "create_repository_from_env",
    "AllowedUsers",
    "AllowedIds",
    "MessageChannel",
    "LocalChannel",
]
