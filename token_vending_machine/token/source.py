"""Token value generators."""

from __future__ import annotations

import secrets
from typing import Protocol
from uuid import uuid4


class TokenSource(Protocol):
    """Produces fresh, unguessable token values."""

    async def next(self) -> str:
        """Return a value that collides with no issued token."""


class RandomUUIDTokens:
    """Random (version 4) UUID text, e.g. ``0b4e7a0e-5c3f-4d51-9a5e-8c2f1b0e6a7d``."""

    async def next(self) -> str:
        return str(uuid4())


class RandomHexTokens:
    """Hex tokens drawn from :mod:`secrets`; ``nbytes`` of entropy."""

    def __init__(self, nbytes: int = 32) -> None:
        if nbytes < 16:
            raise ValueError("nbytes must be at least 16 for bearer tokens.")
        self.nbytes = nbytes

    async def next(self) -> str:
        return secrets.token_hex(self.nbytes)
