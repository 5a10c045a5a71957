from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from boardapp.application.services.jwt_tokens import JwtTokenService
from boardapp.shared.errors import UnauthorizedError

SECRET = "unit-test-secret-key-that-is-long-enough"


def test_issued_token_carries_username_and_expiry() -> None:
    issued_at = datetime(2030, 1, 1, tzinfo=UTC)
    service = JwtTokenService(secret=SECRET, expires_in=3600, clock=lambda: issued_at)

    token = service.issue("alice")
    payload = jwt.decode(
        token, SECRET, algorithms=["HS256"], options={"verify_exp": False}
    )

    assert payload["username"] == "alice"
    assert payload["exp"] - payload["iat"] == 3600


def test_decode_returns_claims() -> None:
    service = JwtTokenService(secret=SECRET, expires_in=60)

    claims = service.decode(service.issue("alice"))

    assert claims.username == "alice"
    assert claims.expires_at > claims.issued_at


def test_decode_rejects_expired_token() -> None:
    past = datetime.now(UTC) - timedelta(hours=2)
    issuer = JwtTokenService(secret=SECRET, expires_in=3600, clock=lambda: past)
    token = issuer.issue("alice")

    with pytest.raises(UnauthorizedError) as exc_info:
        JwtTokenService(secret=SECRET).decode(token)

    assert exc_info.value.code == "token_expired"
    assert exc_info.value.status == 401


def test_decode_rejects_tampered_token() -> None:
    service = JwtTokenService(secret=SECRET)
    header, payload, signature = service.issue("alice").split(".")
    tampered = ".".join([header, payload, signature[::-1]])

    with pytest.raises(UnauthorizedError) as exc_info:
        service.decode(tampered)

    assert exc_info.value.code == "invalid_token"


def test_decode_rejects_garbage() -> None:
    with pytest.raises(UnauthorizedError):
        JwtTokenService(secret=SECRET).decode("not-a-jwt")


def test_decode_rejects_token_without_username() -> None:
    exp = int((datetime.now(UTC) + timedelta(minutes=5)).timestamp())
    token = jwt.encode({"sub": "alice", "exp": exp}, SECRET, algorithm="HS256")

    with pytest.raises(UnauthorizedError) as exc_info:
        JwtTokenService(secret=SECRET).decode(token)

    assert exc_info.value.code == "invalid_token"


def test_decode_rejects_token_without_expiry() -> None:
    token = jwt.encode({"username": "alice"}, SECRET, algorithm="HS256")

    with pytest.raises(UnauthorizedError):
        JwtTokenService(secret=SECRET).decode(token)
