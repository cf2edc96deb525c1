"""Interactive console bot: each stdin line is a chat message from one user."""

from __future__ import annotations

import asyncio
import logging
import os
import sys

from ..access.allowed import allowed_users_from_env
from ..chat.local import LocalChannel
from ..config import VendingConfig
from ..machine import TokenVendingMachine
from ..storage import create_repository_from_env
from ..token.source import RandomHexTokens


async def main() -> None:
    logging.basicConfig(level=os.getenv("TVM_LOG_LEVEL", "WARNING"))
    user_id = os.getenv("TVM_CONSOLE_USER_ID", "1001")
    channel = LocalChannel()
    machine = TokenVendingMachine(
        channel,
        allowed_users_from_env(),
        create_repository_from_env(),
        RandomHexTokens(),
        VendingConfig.from_env(),
    )
    print(f"Chatting as user {user_id}. Ctrl-D to quit.")
    loop = asyncio.get_running_loop()
    try:
        while True:
            line = await loop.run_in_executor(None, sys.stdin.readline)
            if not line:
                break
            text = line.strip()
            if not text:
                continue
            for reply in await channel.dispatch(user_id, text):
                print(reply.text)
    finally:
        await machine.tokens_repository.close()


if __name__ == "__main__":
    asyncio.run(main())
