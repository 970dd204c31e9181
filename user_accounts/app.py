# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from user_accounts.infrastructure.container import Container, container
from user_accounts.infrastructure.db import init_db
from user_accounts.shared.errors import register_error_handler
from user_accounts.shared.logging import logger, setup_logging
from user_accounts.shared.middleware.request_logger import configure_request_logging


def create_app(app_container: Container | None = None) -> Flask:
    app_container = app_container or container
    config = app_container.config

    setup_logging(debug_mode=config.debug_logging)
    init_db()

    app = Flask(__name__)
    app.json.sort_keys = False
    register_error_handler(app)
    configure_request_logging(app)

    cors_kwargs: dict[str, object] = {
        "resources": {r"/api/*": {"origins": config.security.allowed_origins}},
        "allow_headers": ["Authorization", "Content-Type", "X-Request-ID"],
    }
    CORS(app, **cors_kwargs)

    app.register_blueprint(app_container.misc_controller.as_blueprint())
    app.register_blueprint(app_container.auth_controller.as_blueprint())
    app.register_blueprint(app_container.users_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cache-Control", "no-store")

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )

        return resp

    logger.info(f"Flask app initialized env={config.app_env}")
    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=5500, debug=True)
