"""Chat transport capability and the in-process channel."""

from .base import InboundMessage, MessageChannel, MessageHandler, ReplyCallable
from .local import LocalChannel, Reply, parse_command

__all__ = [
    "InboundMessage",
    "MessageChannel",
    "MessageHandler",
    "ReplyCallable",
    "LocalChannel",
    "Reply",
    "parse_command",
]
