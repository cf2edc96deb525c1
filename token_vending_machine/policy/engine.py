"""Allow-list and quota gates."""

from __future__ import annotations

from typing import Optional

from ..access.allowed import AllowedUsers
from ..config import VendingConfig
from .types import AccessDecision, AccessResult


class AccessPolicy:
    """Evaluate whether a user may act and whether they may hold another token."""

    def __init__(self, allowed_users: AllowedUsers, config: Optional[VendingConfig] = None) -> None:
        self.allowed_users = allowed_users
        self.config = config or VendingConfig()

    async def check_user(self, user_id: str) -> AccessResult:
        if await self.allowed_users.contains(user_id):
            return AccessResult(AccessDecision.ALLOW, "allow_listed")
        return AccessResult(AccessDecision.DENY, "not_allow_listed")

    def check_quota(self, held_tokens: int) -> AccessResult:
        # Expired tokens still count; only revocation frees a slot.
        if held_tokens >= self.config.max_tokens_per_user:
            return AccessResult(AccessDecision.QUOTA_EXCEEDED, "max_tokens_per_user")
        return AccessResult(AccessDecision.ALLOW, "under_quota")
