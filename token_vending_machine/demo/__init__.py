"""Runnable demos driving the machine through :class:`LocalChannel`."""

from .run_demo import build_demo_machine, run_scripted_session

__all__ = ["build_demo_machine", "run_scripted_session"]
