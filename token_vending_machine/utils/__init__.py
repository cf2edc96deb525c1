"""Utility helpers for time operations."""

from .time import format_ms, from_ms, now_ms, utc_now

__all__ = ["utc_now", "now_ms", "from_ms", "format_ms"]
