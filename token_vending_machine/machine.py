"""Token vending machine: command handlers and token status queries."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from . import messages
from .access.allowed import AllowedUsers
from .chat.base import InboundMessage, MessageChannel
from .config import VendingConfig
from .policy.engine import AccessPolicy
from .storage.base import TokensRepository
from .token.source import TokenSource
from .token.types import TokenStatus, status_of
from .utils.time import now_ms

logger = logging.getLogger(__name__)


class TokenVendingMachine:
    """Issues, lists and revokes bearer tokens for allow-listed chat users.

    Handlers are registered on ``channel`` at construction. The machine keeps
    no state of its own; every record lives in ``tokens_repository``. Backend
    failures are logged and answered with a fixed per-command message, so no
    exception ever propagates into the channel.
    """

    def __init__(
        self,
        channel: MessageChannel,
        allowed_users: AllowedUsers,
        tokens_repository: TokensRepository,
        token_source: TokenSource,
        config: Optional[VendingConfig] = None,
        *,
        clock: Optional[Callable[[], int]] = None,
    ) -> None:
        self.channel = channel
        self.tokens_repository = tokens_repository
        self.token_source = token_source
        self.config = config or VendingConfig()
        self.policy = AccessPolicy(allowed_users, self.config)
        self.clock = clock or now_ms
        self._setup_handlers()

    def _setup_handlers(self) -> None:
        self.channel.start(self.handle_start)
        self.channel.command("token", self.handle_token)
        self.channel.command("tokens", self.handle_tokens)
        self.channel.command("revoke", self.handle_revoke)
        self.channel.on_message(self.handle_message)

    async def _deny(self, message: InboundMessage, command: str) -> None:
        logger.info("Access denied for user %s on %s", message.from_id, command)
        await message.reply(messages.ACCESS_DENIED)

    async def _gate(self, message: InboundMessage, command: str, failure_reply: str) -> bool:
        """Run the allow-list check; on refusal or failure reply and return False."""
        try:
            access = await self.policy.check_user(message.from_id)
        except Exception:
            logger.exception("Allow-list check failed for user %s on %s", message.from_id, command)
            await message.reply(failure_reply)
            return False
        if not access.allowed:
            await self._deny(message, command)
            return False
        return True

    async def handle_start(self, message: InboundMessage) -> None:
        if not await self._gate(message, "/start", messages.ACCESS_DENIED):
            return
        await message.reply(messages.WELCOME)

    async def handle_token(self, message: InboundMessage) -> None:
        owner_id = message.from_id
        try:
            held = await self.tokens_repository.find_by_owner(owner_id)
            # The quota gate runs before the allow list, so a de-listed user
            # still holding max tokens gets the quota reply.
            if not self.policy.check_quota(len(held)).allowed:
                logger.info("User %s reached the token quota (%d)", owner_id, self.config.max_tokens_per_user)
                return await message.reply(messages.QUOTA_REACHED)

            access = await self.policy.check_user(owner_id)
            if not access.allowed:
                return await self._deny(message, "/token")

            value = await self.token_source.next()
            token = await self.tokens_repository.create(
                owner_id=owner_id,
                lifetime_ms=self.config.token_lifetime_ms,
                value=value,
            )
        except Exception:
            logger.exception("Failed to create token for user %s", owner_id)
            return await message.reply(messages.CREATE_FAILED)

        logger.info("Issued token %s for user %s", token.name, owner_id)
        await message.reply(messages.token_issued(token), markdown=True)

    async def handle_tokens(self, message: InboundMessage) -> None:
        if not await self._gate(message, "/tokens", messages.LIST_FAILED):
            return

        try:
            tokens = await self.tokens_repository.find_by_owner(message.from_id)
        except Exception:
            logger.exception("Failed to list tokens for user %s", message.from_id)
            return await message.reply(messages.LIST_FAILED)

        if not tokens:
            return await message.reply(messages.NO_TOKENS)

        text = messages.token_list(tokens, now_ms=self.clock(), mask=self.config.mask_token_values)
        await message.reply(text, markdown=True)

    async def handle_revoke(self, message: InboundMessage) -> None:
        if not await self._gate(message, "/revoke", messages.REVOKE_FAILED):
            return

        args = message.text.split()
        if len(args) != 2:
            return await message.reply(messages.REVOKE_USAGE)
        value = args[1]

        try:
            await self.tokens_repository.revoke(value)
        except Exception:
            logger.exception("Failed to revoke token for user %s", message.from_id)
            return await message.reply(messages.REVOKE_FAILED)

        logger.info("User %s revoked a token", message.from_id)
        await message.reply(messages.token_revoked(value), markdown=True)

    async def handle_message(self, message: InboundMessage) -> None:
        if not await self._gate(message, "message", messages.ACCESS_DENIED):
            return
        await message.reply(messages.HELP)

    async def token_status(self, value: str) -> TokenStatus:
        """Classify ``value`` without any allow-list gate.

        A storage failure is logged and reported as ``NOT_FOUND``; this query
        never raises.
        """
        try:
            token = await self.tokens_repository.find_by_value(value)
        except Exception:
            logger.exception("Failed to look up token status")
            return TokenStatus.NOT_FOUND
        return status_of(token, self.clock())
