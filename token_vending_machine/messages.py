"""User-facing reply texts and formatters."""

from __future__ import annotations

from typing import Sequence

from .token.types import Token, is_expired
from .utils.time import format_ms

WELCOME = "Welcome! Use /token to get a new API token."
ACCESS_DENIED = "Access denied."
QUOTA_REACHED = "You have reached the maximum number of tokens."
NO_TOKENS = "No tokens found."
REVOKE_USAGE = "Usage: /revoke <token_value>\nExample: /revoke abc123def456"
HELP = (
    "Use commands:\n"
    "/start - greeting\n"
    "/token - get a new API token\n"
    "/tokens - list all tokens\n"
    "/revoke <token> - revoke a token"
)

CREATE_FAILED = "Error creating token. Please try again later."
LIST_FAILED = "Error getting tokens. Please try again later."
REVOKE_FAILED = "Error revoking token. Please try again later."

STATUS_VALID = "✅ Valid"
STATUS_EXPIRED = "❌ Expired"


def mask_value(value: str) -> str:
    """Keep the first and last four characters of long values."""
    if len(value) <= 8:
        return "*" * len(value)
    return f"{value[:4]}...{value[-4:]}"


def token_issued(token: Token) -> str:
    return f"Your new API token:\n`{token.value}`\n\nToken is valid until: {format_ms(token.expires_at_ms)}"


def token_revoked(value: str) -> str:
    return f"Token `{value}` has been revoked."


def token_list(tokens: Sequence[Token], *, now_ms: int, mask: bool = False) -> str:
    """Render a 1-indexed list; every row is judged against the same ``now_ms``."""
    entries = []
    for index, token in enumerate(tokens, start=1):
        status = STATUS_EXPIRED if is_expired(token, now_ms) else STATUS_VALID
        shown = mask_value(token.value) if mask else token.value
        entries.append(
            f"{index}. **{token.name}**\n"
            f"   Token: `{shown}`\n"
            f"   Status: {status}\n"
            f"   Expires: {format_ms(token.expires_at_ms)}\n"
        )
    return "**All tokens:**\n\n" + "\n".join(entries)
