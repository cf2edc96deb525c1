"""UTC time helpers."""

from __future__ import annotations

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def now_ms() -> int:
    """Return the current wall-clock time as epoch milliseconds."""
    return int(utc_now().timestamp() * 1000)


def from_ms(epoch_ms: int) -> datetime:
    """Convert epoch milliseconds into a timezone-aware UTC datetime."""
    return datetime.fromtimestamp(epoch_ms / 1000, tz=timezone.utc)


def format_ms(epoch_ms: int) -> str:
    """Render epoch milliseconds for humans, e.g. ``2026-10-18 21:22:00 UTC``."""
    return from_ms(epoch_ms).strftime("%Y-%m-%d %H:%M:%S UTC")
