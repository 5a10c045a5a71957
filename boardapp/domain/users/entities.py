# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from boardapp.domain.exceptions import InvariantViolation


@dataclass(slots=True, frozen=True)
class User:

    id: int
    username: str
    password_hash: str
    created_at: datetime

    def __post_init__(self) -> None:
        if not self.username:
            raise InvariantViolation("username must not be empty", field="username")


@dataclass(slots=True, frozen=True)
class TokenClaims:
    """Decoded payload of an access token."""

    username: str
    issued_at: datetime
    expires_at: datetime
