# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask, Response
from flask_cors import CORS

from employee_api.container import Container
from employee_api.infrastructure.auth import JwtTokenService
from employee_api.infrastructure.repositories.employees import InMemoryEmployeeRepository
from employee_api.shared.config import AppConfig, load_config
from employee_api.shared.logging import logger, setup_logging
from employee_api.shared.middleware.error_handler import configure_error_handling
from employee_api.shared.middleware.request_logger import configure_request_logging


def _configure_security_headers(app: Flask, config: AppConfig) -> None:
    @app.after_request
    def _add_security_headers(resp: Response) -> Response:
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cross-Origin-Resource-Policy", "same-origin")

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains",
            )

        return resp


def create_app(
    config: AppConfig | None = None,
    *,
    employee_repository: InMemoryEmployeeRepository | None = None,
    token_service: JwtTokenService | None = None,
) -> Flask:
    config = config or load_config()
    container = Container(
        config,
        employee_repository=employee_repository,
        token_service=token_service,
    )

    app = Flask(__name__)
    app.json.sort_keys = False
    app.extensions["employee_api"] = container

    # Registered first so it also covers the hooks installed below.
    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)

    CORS(app, resources={r"/*": {"origins": config.security.origins()}})
    _configure_security_headers(app, config)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.docs_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.employees_controller.as_blueprint())

    logger.info(f"Flask app initialized (env={config.app_env})")
    return app


def main() -> None:
    config = load_config()
    setup_logging(config.log_level, log_file=config.log_file)
    app = create_app(config)
    app.run(host=config.host, port=config.port, threaded=True)


if __name__ == "__main__":
    main()
