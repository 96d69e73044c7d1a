"""Tests for the token service."""

from __future__ import annotations

from datetime import timedelta

import jwt
import pytest

from portfolio_api.errors import ConfigurationError, InvalidToken
from portfolio_api.services.tokens import ALGORITHM, Identity, TokenService

SECRET = "unit-test-secret-0123456789abcdef"


@pytest.fixture
def tokens() -> TokenService:
    return TokenService(SECRET)


def test_issue_then_verify_round_trips_identity(tokens: TokenService) -> None:
    token = tokens.issue("abc123", "admin")

    assert tokens.verify(token) == Identity(id="abc123", role="admin")


def test_default_lifetime_is_seven_days(tokens: TokenService) -> None:
    payload = jwt.decode(tokens.issue("abc", "admin"), SECRET, algorithms=[ALGORITHM])

    assert payload["exp"] - payload["iat"] == int(timedelta(days=7).total_seconds())


def test_wrong_signature_is_rejected(tokens: TokenService) -> None:
    token = TokenService("another-secret-0123456789abcdefghij").issue("abc", "admin")

    with pytest.raises(InvalidToken):
        tokens.verify(token)


def test_malformed_token_is_rejected(tokens: TokenService) -> None:
    with pytest.raises(InvalidToken):
        tokens.verify("not-a-jwt")


def test_expired_token_is_rejected() -> None:
    expired = TokenService(SECRET, lifetime=timedelta(seconds=-10))
    token = expired.issue("abc", "admin")

    with pytest.raises(InvalidToken):
        TokenService(SECRET).verify(token)


def test_token_without_role_is_rejected(tokens: TokenService) -> None:
    token = jwt.encode({"sub": "abc", "exp": 9999999999}, SECRET, algorithm=ALGORITHM)

    with pytest.raises(InvalidToken):
        tokens.verify(token)


def test_empty_secret_refused() -> None:
    with pytest.raises(ConfigurationError):
        TokenService("")
