"""Access policy gates."""

from .engine import AccessPolicy
from .types import AccessDecision, AccessResult

__all__ = ["AccessPolicy", "AccessDecision", "AccessResult"]
