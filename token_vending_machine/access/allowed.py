"""Allow-list capability and a static implementation."""

from __future__ import annotations

import os
from typing import Iterable, Protocol, Union

UserId = Union[int, str]


class AllowedUsers(Protocol):
    """Membership test for chat user identifiers."""

    async def contains(self, user_id: str) -> bool:
        """Return True if the user may use any command."""


class AllowedIds:
    """Fixed allow list. Ids are compared as text so ``42`` and ``"42"`` match."""

    def __init__(self, user_ids: Iterable[UserId]) -> None:
        self._ids = frozenset(str(user_id).strip() for user_id in user_ids)

    async def contains(self, user_id: UserId) -> bool:
        return str(user_id) in self._ids

    def __len__(self) -> int:
        return len(self._ids)


def allowed_users_from_env(var: str = "TVM_ALLOWED_USER_IDS") -> AllowedIds:
    """Build an allow list from a comma separated environment variable."""
    raw = os.getenv(var, "")
    return AllowedIds(part for part in raw.split(",") if part.strip())
