# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Protocol

from flask import g, request

from boardapp.domain.users.entities import User
from boardapp.shared.errors import UnauthorizedError
from boardapp.shared.logging import logger


class BearerVerifier(Protocol):
    def from_header(self, authorization: str | None) -> User: ...


class SupportsBearerAuth(Protocol):
    _verify_token: BearerVerifier


def auth_required(f: Callable):
    """Resolve the caller from the bearer token and pass it as ``caller``.

    The decorated controller must hold its verifier in ``self._verify_token``.
    """

    @wraps(f)
    def inner(self: SupportsBearerAuth, *a, **kw):
        try:
            user = self._verify_token.from_header(request.headers.get("Authorization"))
        except UnauthorizedError as exc:
            logger.warning(
                f"Auth failed ({exc.code}) on {request.method} {request.path} "
                f"from {request.headers.get('X-Forwarded-For', request.remote_addr)}"
            )
            raise

        g.current_user = user
        g.user_id = user.id
        kw["caller"] = user
        logger.debug(f"Auth OK: user={user.id} {request.method} {request.path}")
        return f(self, *a, **kw)

    return inner


__all__ = ["auth_required"]
