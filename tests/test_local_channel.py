import asyncio

from token_vending_machine.chat import InboundMessage, LocalChannel, Reply, parse_command


def test_parse_command() -> None:
    assert parse_command("/start") == "start"
    assert parse_command("/Token") == "token"
    assert parse_command("/revoke abc") == "revoke"
    assert parse_command("/tokens@vending_bot", "vending_bot") == "tokens"
    assert parse_command("/tokens@other_bot", "vending_bot") is None
    assert parse_command("hello /token") is None
    assert parse_command("/token-x") is None
    assert parse_command("") is None


def test_dispatch_routes_to_registered_handlers() -> None:
    seen: list[tuple[str, str, str]] = []

    def recorder(kind: str):
        async def handler(message: InboundMessage) -> None:
            seen.append((kind, message.from_id, message.text))
            await message.reply(f"{kind}!", markdown=kind == "token")

        return handler

    async def run() -> None:
        channel = LocalChannel(bot_username="vending_bot")
        channel.start(recorder("start"))
        channel.command("token", recorder("token"))
        channel.on_message(recorder("message"))

        assert await channel.dispatch(7, "/start") == [Reply("start!")]
        assert await channel.dispatch(7, "/token@vending_bot") == [Reply("token!", markdown=True)]
        assert await channel.dispatch(7, "/nope") == [Reply("message!")]
        assert await channel.dispatch(7, "plain text") == [Reply("message!")]

    asyncio.run(run())
    assert seen[0] == ("start", "7", "/start")
    assert [kind for kind, _, _ in seen] == ["start", "token", "message", "message"]


def test_dispatch_without_handler_returns_no_replies() -> None:
    async def run() -> None:
        channel = LocalChannel()
        assert await channel.dispatch("1", "/token") == []

    asyncio.run(run())
