"""User allow-list capability."""

from .allowed import AllowedIds, AllowedUsers, UserId, allowed_users_from_env

__all__ = ["AllowedUsers", "AllowedIds", "UserId", "allowed_users_from_env"]
