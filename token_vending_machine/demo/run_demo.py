"""Run a scripted issue/list/revoke session against the vending machine."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from ..access.allowed import AllowedIds
from ..chat.local import LocalChannel, Reply
from ..config import VendingConfig
from ..machine import TokenVendingMachine
from ..storage import TokensRepository, create_repository_from_env
from ..token.source import RandomUUIDTokens

DEMO_USER_ID = "1001"
STRANGER_ID = "2002"


def build_demo_machine(
    *,
    repository: Optional[TokensRepository] = None,
    config: Optional[VendingConfig] = None,
) -> tuple[TokenVendingMachine, LocalChannel]:
    channel = LocalChannel()
    machine = TokenVendingMachine(
        channel,
        AllowedIds([DEMO_USER_ID]),
        repository or create_repository_from_env(),
        RandomUUIDTokens(),
        config or VendingConfig(max_tokens_per_user=3),
    )
    return machine, channel


async def run_scripted_session(channel: LocalChannel) -> list[tuple[str, str, list[Reply]]]:
    """Replay a fixed conversation and return ``(user, text, replies)`` triples."""
    transcript: list[tuple[str, str, list[Reply]]] = []

    async def say(user_id: str, text: str) -> list[Reply]:
        replies = await channel.dispatch(user_id, text)
        transcript.append((user_id, text, replies))
        return replies

    await say(STRANGER_ID, "/start")
    await say(DEMO_USER_ID, "/start")
    issued = await say(DEMO_USER_ID, "/token")
    await say(DEMO_USER_ID, "/tokens")
    if issued and "`" in issued[0].text:
        value = issued[0].text.split("`")[1]
        await say(DEMO_USER_ID, f"/revoke {value}")
    await say(DEMO_USER_ID, "/revoke")
    await say(DEMO_USER_ID, "hello")
    return transcript


async def main() -> None:
    logging.basicConfig(level=logging.INFO)
    machine, channel = build_demo_machine()
    try:
        for user_id, text, replies in await run_scripted_session(channel):
            print(f"[{user_id}] {text}")
            for reply in replies:
                print(f"  -> {reply.text}")
    finally:
        await machine.tokens_repository.close()


if __name__ == "__main__":
    asyncio.run(main())
