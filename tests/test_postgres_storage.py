import asyncio
import os
from uuid import uuid4

import pytest

from token_vending_machine.errors import DuplicateTokenError
from token_vending_machine.storage.postgres import PostgresTokensRepository

PG_DSN = os.getenv("TVM_TEST_PG_DSN")


def test_requires_dsn_or_pool() -> None:
    async def run() -> None:
        repository = PostgresTokensRepository()
        with pytest.raises(ValueError):
            await repository.connect()

    asyncio.run(run())


@pytest.mark.skipif(not PG_DSN, reason="TVM_TEST_PG_DSN not set")
def test_postgres_round_trip_and_revoke() -> None:
    ticks = iter(range(1_000, 10_000, 10))

    async def run() -> None:
        repository = PostgresTokensRepository(dsn=PG_DSN, clock=lambda: next(ticks))
        owner = f"user-{uuid4()}"
        try:
            first = await repository.create(owner_id=owner, name="one", lifetime_ms=1000, value=str(uuid4()))
            second = await repository.create(owner_id=owner, name="two", lifetime_ms=2000, value=str(uuid4()))

            assert await repository.find_by_value(first.value) == first
            assert [t.value for t in await repository.find_by_owner(owner)] == [first.value, second.value]

            with pytest.raises(DuplicateTokenError):
                await repository.create(owner_id=owner, name="dup", lifetime_ms=1000, value=first.value)

            await repository.revoke(first.value)
            await repository.revoke(first.value)
            assert await repository.find_by_value(first.value) is None
            assert await repository.find_by_owner(owner) == [second]
        finally:
            for token in await repository.find_by_owner(owner):
                await repository.revoke(token.value)
            await repository.close()

    asyncio.run(run())
