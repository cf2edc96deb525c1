import asyncio

import pytest

from token_vending_machine.access import AllowedIds, allowed_users_from_env
from token_vending_machine.config import DEFAULT_MAX_TOKENS_PER_USER, DEFAULT_TOKEN_LIFETIME_MS, VendingConfig
from token_vending_machine.policy import AccessDecision, AccessPolicy


def test_config_defaults() -> None:
    config = VendingConfig()
    assert config.token_lifetime_ms == DEFAULT_TOKEN_LIFETIME_MS == 2_592_000_000
    assert config.max_tokens_per_user == DEFAULT_MAX_TOKENS_PER_USER == 20
    assert config.mask_token_values is False


@pytest.mark.parametrize("kwargs", [{"token_lifetime_ms": 0}, {"token_lifetime_ms": -5}, {"max_tokens_per_user": 0}])
def test_config_rejects_non_positive_values(kwargs) -> None:
    with pytest.raises(ValueError):
        VendingConfig(**kwargs)


def test_config_from_env(monkeypatch) -> None:
    monkeypatch.setenv("TVM_TOKEN_LIFETIME_MS", "3600000")
    monkeypatch.setenv("TVM_MAX_TOKENS_PER_USER", "3")
    monkeypatch.setenv("TVM_MASK_TOKEN_VALUES", "yes")
    config = VendingConfig.from_env()
    assert config == VendingConfig(token_lifetime_ms=3_600_000, max_tokens_per_user=3, mask_token_values=True)


def test_config_from_env_falls_back_to_defaults(monkeypatch) -> None:
    for var in ("TVM_TOKEN_LIFETIME_MS", "TVM_MAX_TOKENS_PER_USER", "TVM_MASK_TOKEN_VALUES"):
        monkeypatch.delenv(var, raising=False)
    assert VendingConfig.from_env() == VendingConfig()


def test_allowed_ids_compare_as_text() -> None:
    async def run() -> None:
        allowed = AllowedIds([12345, " 777 "])
        assert await allowed.contains("12345") is True
        assert await allowed.contains(12345) is True
        assert await allowed.contains("777") is True
        assert await allowed.contains("99999") is False
        assert len(allowed) == 2

    asyncio.run(run())


def test_allowed_users_from_env(monkeypatch) -> None:
    async def run() -> None:
        monkeypatch.setenv("TVM_ALLOWED_USER_IDS", "1, 2,,3")
        allowed = allowed_users_from_env()
        assert len(allowed) == 3
        assert await allowed.contains("2") is True

        monkeypatch.delenv("TVM_ALLOWED_USER_IDS")
        assert len(allowed_users_from_env()) == 0

    asyncio.run(run())


def test_access_policy_gates() -> None:
    async def run() -> None:
        policy = AccessPolicy(AllowedIds(["1"]), VendingConfig(max_tokens_per_user=2))

        allowed = await policy.check_user("1")
        denied = await policy.check_user("2")
        assert allowed.allowed and allowed.decision == AccessDecision.ALLOW
        assert not denied.allowed and denied.decision == AccessDecision.DENY

        assert policy.check_quota(1).allowed
        over = policy.check_quota(2)
        assert over.decision == AccessDecision.QUOTA_EXCEEDED
        assert over.reason == "max_tokens_per_user"

    asyncio.run(run())


@pytest.mark.parametrize(
    "kwargs",
    [
        {"token_lifetime_ms": 1.5},
        {"token_lifetime_ms": "3600000"},
        {"token_lifetime_ms": True},
        {"max_tokens_per_user": 2.0},
        {"max_tokens_per_user": True},
    ],
)
def test_config_rejects_non_integer_values(kwargs) -> None:
    with pytest.raises(ValueError):
        VendingConfig(**kwargs)
