from token_vending_machine.token import Token, TokenStatus, default_token_name, is_expired, status_of


def make_token(created_at_ms: int = 1_000, lifetime_ms: int = 500) -> Token:
    return Token(name="n", value="v", owner_id="42", created_at_ms=created_at_ms, lifetime_ms=lifetime_ms)


def test_expires_at_is_creation_plus_lifetime() -> None:
    assert make_token().expires_at_ms == 1_500


def test_expiry_boundary_is_inclusive() -> None:
    token = make_token()
    assert is_expired(token, 1_499) is False
    assert is_expired(token, 1_500) is True
    assert token.is_expired(1_501) is True


def test_status_of_lookup_results() -> None:
    token = make_token()
    assert status_of(None, 0) == TokenStatus.NOT_FOUND
    assert status_of(token, 1_499) == TokenStatus.VALID
    assert status_of(token, 1_500) == TokenStatus.EXPIRED


def test_status_values_are_strings() -> None:
    assert TokenStatus.VALID.value == "VALID"
    assert TokenStatus("EXPIRED") is TokenStatus.EXPIRED


def test_default_token_name() -> None:
    assert default_token_name("12345", 1_700_000_000_000) == "12345-1700000000000"
