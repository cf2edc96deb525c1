"""Configuration for the token vending machine."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_TOKEN_LIFETIME_MS = 1000 * 60 * 60 * 24 * 30  # 30 days
DEFAULT_MAX_TOKENS_PER_USER = 20

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class VendingConfig:
    """Issuance policy knobs fixed at construction."""

    token_lifetime_ms: int = DEFAULT_TOKEN_LIFETIME_MS
    max_tokens_per_user: int = DEFAULT_MAX_TOKENS_PER_USER
    mask_token_values: bool = False

    def __post_init__(self) -> None:
        for name in ("token_lifetime_ms", "max_tokens_per_user"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}.")

    @classmethod
    def from_env(cls) -> "VendingConfig":
        """Read ``TVM_*`` variables, falling back to defaults for missing ones."""
        return cls(
            token_lifetime_ms=int(os.getenv("TVM_TOKEN_LIFETIME_MS", DEFAULT_TOKEN_LIFETIME_MS)),
            max_tokens_per_user=int(os.getenv("TVM_MAX_TOKENS_PER_USER", DEFAULT_MAX_TOKENS_PER_USER)),
            mask_token_values=os.getenv("TVM_MASK_TOKEN_VALUES", "").strip().lower() in _TRUTHY,
        )
