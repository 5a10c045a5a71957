from __future__ import annotations

import pytest
from flask import Flask

from boardapp.shared.config import load_config
from boardapp.shared.middleware import rate_limit as rate_limit_module
from boardapp.shared.middleware.error_handler import configure_error_handling
from boardapp.shared.middleware.rate_limit import InMemoryRateLimiter, rate_limit


def test_rate_limiter_blocks_after_limit_within_window() -> None:
    limiter = InMemoryRateLimiter(limit=2, window_seconds=10.0)

    assert limiter.allow("login:1.2.3.4", now=0.0)
    assert limiter.allow("login:1.2.3.4", now=1.0)
    assert not limiter.allow("login:1.2.3.4", now=2.0)
    assert limiter.allow("login:5.6.7.8", now=2.0)


def test_rate_limiter_recovers_after_window() -> None:
    limiter = InMemoryRateLimiter(limit=1, window_seconds=5.0)

    assert limiter.allow("register:ip", now=0.0)
    assert not limiter.allow("register:ip", now=4.0)
    assert limiter.allow("register:ip", now=5.5)


def test_rate_limiter_evicts_stale_buckets() -> None:
    limiter = InMemoryRateLimiter(limit=1, window_seconds=5.0)
    for n in range(11):
        assert limiter.allow(f"login:10.0.0.{n}", now=1.0)
    assert len(limiter) == 11

    assert limiter.allow("login:10.0.0.99", now=20.0)

    assert len(limiter) == 1


def _app_with_limited_view(monkeypatch: pytest.MonkeyPatch, *, enabled: bool) -> Flask:
    config = load_config()
    security = config.security.model_copy(update={"enable_rate_limit": enabled})
    patched = config.model_copy(update={"security": security})
    monkeypatch.setattr(rate_limit_module, "load_config", lambda: patched)

    app = Flask(__name__)
    configure_error_handling(app)

    @app.post("/api/auth/login")
    @rate_limit(limit=1, window_seconds=60.0)
    def login():
        return {"ok": True}

    return app


def test_rate_limit_returns_429_once_exhausted(monkeypatch: pytest.MonkeyPatch) -> None:
    app = _app_with_limited_view(monkeypatch, enabled=True)

    with app.test_client() as client:
        first = client.post("/api/auth/login")
        second = client.post("/api/auth/login")

    assert first.status_code == 200
    assert second.status_code == 429
    assert second.get_json() == {"error": "rate_limited"}


def test_rate_limit_ignores_forwarded_for_header(monkeypatch: pytest.MonkeyPatch) -> None:
    app = _app_with_limited_view(monkeypatch, enabled=True)

    with app.test_client() as client:
        first = client.post("/api/auth/login", headers={"X-Forwarded-For": "10.0.0.1"})
        second = client.post("/api/auth/login", headers={"X-Forwarded-For": "10.0.0.2"})

    assert first.status_code == 200
    assert second.status_code == 429


def test_rate_limit_disabled_lets_every_request_through(monkeypatch: pytest.MonkeyPatch) -> None:
    app = _app_with_limited_view(monkeypatch, enabled=False)

    with app.test_client() as client:
        statuses = [client.post("/api/auth/login").status_code for _ in range(3)]

    assert statuses == [200, 200, 200]
