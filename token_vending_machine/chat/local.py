"""In-process message channel that routes text the way chat bots do."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Optional

from ..access.allowed import UserId
from .base import InboundMessage, MessageHandler

COMMAND_RE = re.compile(r"^/([A-Za-z0-9_]+)(?:@([A-Za-z0-9_]+))?(?:\s|$)")


@dataclass(frozen=True)
class Reply:
    """A reply captured by :class:`LocalChannel`."""

    text: str
    markdown: bool = False


def parse_command(text: str, bot_username: Optional[str] = None) -> Optional[str]:
    """Return the command name addressed to this bot, or None for plain text."""
    match = COMMAND_RE.match(text)
    if match is None:
        return None
    name, addressee = match.group(1), match.group(2)
    if addressee and bot_username and addressee.lower() != bot_username.lower():
        return None
    return name.lower()


class LocalChannel:
    """Message channel driven by :meth:`dispatch` calls instead of a network bot."""

    def __init__(self, *, bot_username: Optional[str] = None) -> None:
        self.bot_username = bot_username
        self._start_handler: Optional[MessageHandler] = None
        self._commands: Dict[str, MessageHandler] = {}
        self._message_handler: Optional[MessageHandler] = None

    def start(self, handler: MessageHandler) -> None:
        self._start_handler = handler

    def command(self, name: str, handler: MessageHandler) -> None:
        self._commands[name.lower()] = handler

    def on_message(self, handler: MessageHandler) -> None:
        self._message_handler = handler

    def handler_for(self, text: str) -> Optional[MessageHandler]:
        name = parse_command(text, self.bot_username)
        if name == "start" and self._start_handler is not None:
            return self._start_handler
        if name is not None and name in self._commands:
            return self._commands[name]
        return self._message_handler

    async def dispatch(self, user_id: UserId, text: str) -> list[Reply]:
        """Deliver one message and return the replies its handler sent."""
        replies: list[Reply] = []

        async def reply(reply_text: str, *, markdown: bool = False) -> None:
            replies.append(Reply(text=reply_text, markdown=markdown))

        handler = self.handler_for(text)
        if handler is not None:
            await handler(InboundMessage(from_id=str(user_id), text=text, reply=reply))
        return replies
