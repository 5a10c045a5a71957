# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Resolve a bearer credential to the user it was issued for."""

from __future__ import annotations

from boardapp.domain.users.entities import User
from boardapp.domain.users.repositories import TokenService, UserRepository
from boardapp.shared.errors import UnauthorizedError
from boardapp.shared.logging import logger

BEARER_SCHEME = "bearer"


def extract_bearer_token(authorization: str | None) -> str:
    """Return the token part of an ``Authorization: Bearer <token>`` header."""

    if not authorization:
        raise UnauthorizedError()
    scheme, _, token = authorization.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != BEARER_SCHEME or not token or " " in token:
        raise UnauthorizedError()
    return token


class VerifyTokenUseCase:
    """Stateless check executed on every protected request.

    The signature and expiry are verified first, then the embedded username is
    looked up so that tokens of deleted users stop working immediately.
    """

    def __init__(self, *, users: UserRepository, tokens: TokenService) -> None:
        self._users = users
        self._tokens = tokens

    def execute(self, token: str) -> User:
        claims = self._tokens.decode(token)
        user = self._users.find_by_username(claims.username)
        if user is None:
            logger.warning(f"auth.verify: unknown subject username={claims.username}")
            raise UnauthorizedError()
        return user

    def from_header(self, authorization: str | None) -> User:
        return self.execute(extract_bearer_token(authorization))
