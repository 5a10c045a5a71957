# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import importlib
from typing import Any, Protocol, cast

from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix

from boardapp.container import Container, container
from boardapp.infrastructure.db import init_db
from boardapp.shared.config import load_config
from boardapp.shared.logging import logger, setup_logging
from boardapp.shared.middleware.error_handler import configure_error_handling
from boardapp.shared.middleware.request_logger import configure_request_logging


class _CORSCallable(Protocol):
    def __call__(self, app: Flask, **kwargs: Any) -> Any: ...


_flask_cors = importlib.import_module("flask_cors")
CORS = cast(_CORSCallable, _flask_cors.CORS)


_config = load_config()


def create_app(app_container: Container | None = None) -> Flask:
    deps = app_container or container

    setup_logging(debug_mode=_config.debug_logging)
    init_db()

    app = Flask(__name__)
    if _config.security.trusted_proxies:
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=_config.security.trusted_proxies)  # type: ignore[method-assign]
    configure_error_handling(app)
    configure_request_logging(app)

    app.config.update(SECRET_KEY=_config.secret_key)

    cors_kwargs: dict[str, object] = {
        "resources": {r"/api/*": {"origins": _config.security.allowed_origins}}
    }
    CORS(app, **cors_kwargs)
    app.register_blueprint(deps.misc_controller.as_blueprint())
    app.register_blueprint(deps.auth_controller.as_blueprint())
    app.register_blueprint(deps.boards_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cache-Control", "no-store")

        if _config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )

        return resp

    logger.info("Flask app initialized")
    return app


def main() -> None:
    app = create_app()
    logger.info(f"Application running on port {_config.server.port}")
    app.run(host=_config.server.host, port=_config.server.port)


if __name__ == "__main__":
    main()
