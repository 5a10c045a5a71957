# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from boardapp.domain.users.exceptions import InvalidCredentialsError
from boardapp.domain.users.repositories import PasswordHasher, TokenService, UserRepository
from boardapp.shared.logging import logger


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenService,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str) -> str:
        user = self._users.find_by_username(username)
        password_valid = user is not None and self._password_hasher.verify(
            password, user.password_hash
        )

        if not password_valid:
            logger.info(f"auth.login: rejected username={username}")
            raise InvalidCredentialsError()

        return self._tokens.issue(user.username)
