"""Access policy datatypes and enums."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class AccessDecision(str, Enum):
    """Outcome of an access or quota check."""

    ALLOW = "ALLOW"
    DENY = "DENY"
    QUOTA_EXCEEDED = "QUOTA_EXCEEDED"


@dataclass(frozen=True)
class AccessResult:
    """Result of evaluating one policy gate for a user."""

    decision: AccessDecision
    reason: str

    @property
    def allowed(self) -> bool:
        return self.decision == AccessDecision.ALLOW
