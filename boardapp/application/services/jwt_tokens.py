# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed, expiring access tokens."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import jwt

from boardapp.domain.users.entities import TokenClaims
from boardapp.domain.users.repositories import TokenService
from boardapp.shared.errors import UnauthorizedError
from boardapp.shared.logging import logger


class JwtTokenService(TokenService):
    """Issues and verifies HMAC-signed JWTs carrying the ``username`` claim."""

    def __init__(
        self,
        *,
        secret: str,
        algorithm: str = "HS256",
        expires_in: int = 3600,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = timedelta(seconds=expires_in)
        self._clock = clock or (lambda: datetime.now(UTC))

    def issue(self, username: str) -> str:
        now = self._clock()
        payload = {
            "username": username,
            "iat": int(now.timestamp()),
            "exp": int((now + self._ttl).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def decode(self, token: str) -> TokenClaims:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp"]},
            )
        except jwt.ExpiredSignatureError as exc:
            logger.info("auth.token: expired")
            raise UnauthorizedError("token_expired") from exc
        except jwt.InvalidTokenError as exc:
            logger.info(f"auth.token: invalid ({type(exc).__name__})")
            raise UnauthorizedError("invalid_token") from exc

        username = payload.get("username")
        if not isinstance(username, str) or not username:
            raise UnauthorizedError("invalid_token")

        issued_at = payload.get("iat")
        return TokenClaims(
            username=username,
            issued_at=datetime.fromtimestamp(issued_at, UTC) if issued_at else self._clock(),
            expires_at=datetime.fromtimestamp(payload["exp"], UTC),
        )
