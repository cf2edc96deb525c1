"""Chat transport datatypes and channel capability."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Callable, Protocol

ReplyCallable = Callable[..., Awaitable[None]]


@dataclass(frozen=True)
class InboundMessage:
    """One inbound chat event as seen by a handler.

    ``reply`` is awaited as ``reply(text, markdown=False)``; ``markdown`` asks
    the transport for rich (bold/code) rendering.
    """

    from_id: str
    text: str
    reply: ReplyCallable


MessageHandler = Callable[[InboundMessage], Awaitable[None]]


class MessageChannel(Protocol):
    """Registers handlers for the bot's start event, named commands and plain messages."""

    def start(self, handler: MessageHandler) -> None:
        """Handle the ``/start`` event."""

    def command(self, name: str, handler: MessageHandler) -> None:
        """Handle ``/<name>``."""

    def on_message(self, handler: MessageHandler) -> None:
        """Handle any message no other handler claimed."""
