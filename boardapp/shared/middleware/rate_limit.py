# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from collections import deque
from collections.abc import Callable
from functools import wraps

from flask import Request, request

from boardapp.shared.config import load_config
from boardapp.shared.errors import RateLimitedError
from boardapp.shared.logging import logger


class InMemoryRateLimiter:
    """Sliding-window limiter; buckets are dropped once their window has passed."""

    def __init__(self, limit: int, window_seconds: float) -> None:
        self._limit = max(1, int(limit))
        self._window = max(0.1, float(window_seconds))
        self._buckets: dict[str, deque[float]] = {}
        self._last_sweep = 0.0

    def __len__(self) -> int:
        return len(self._buckets)

    def allow(self, key: str, now: float | None = None) -> bool:
        now = time.monotonic() if now is None else now
        self._sweep(now)

        timestamps = self._buckets.get(key)
        if timestamps is None:
            timestamps = self._buckets[key] = deque(maxlen=self._limit)
        self._prune(timestamps, now)
        if len(timestamps) >= self._limit:
            return False
        timestamps.append(now)
        return True

    def _prune(self, timestamps: deque[float], now: float) -> None:
        while timestamps and (now - timestamps[0]) > self._window:
            timestamps.popleft()

    def _sweep(self, now: float) -> None:
        if now - self._last_sweep < self._window:
            return
        self._last_sweep = now
        for key in list(self._buckets):
            timestamps = self._buckets[key]
            self._prune(timestamps, now)
            if not timestamps:
                del self._buckets[key]


def _client_key(req: Request) -> str:
    # X-Forwarded-For is only trusted via ProxyFix (TRUSTED_PROXIES), which rewrites remote_addr.
    return req.remote_addr or "unknown"


def rate_limit(limit: int | None = None, window_seconds: float | None = None):
    config = load_config()
    enabled = config.security.enable_rate_limit
    limiter = InMemoryRateLimiter(
        limit or config.security.rate_limit_requests,
        window_seconds or config.security.rate_limit_window,
    )

    def decorator(f: Callable):
        if not enabled:
            return f

        @wraps(f)
        def wrapper(*args, **kwargs):
            key = f"{request.path}:{_client_key(request)}"
            if not limiter.allow(key):
                logger.warning(f"rate_limit: rejected {request.method} {request.path}")
                raise RateLimitedError()
            return f(*args, **kwargs)

        return wrapper

    return decorator


__all__ = ["InMemoryRateLimiter", "rate_limit"]
