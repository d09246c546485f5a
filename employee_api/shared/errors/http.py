# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, g, jsonify, request
from werkzeug.exceptions import HTTPException, InternalServerError

from employee_api.shared.logging import logger, sanitize_query_params

from .base import AppError

GENERIC_ERROR_MESSAGE = "An unexpected error occurred."


def handle_app_error(error: AppError) -> tuple[Response, HTTPStatus]:
    # Server-side failures never expose their code or message.
    if error.status >= HTTPStatus.INTERNAL_SERVER_ERROR:
        return jsonify({"error": GENERIC_ERROR_MESSAGE}), error.status
    response = jsonify(error.to_dict())
    if error.status == HTTPStatus.UNAUTHORIZED:
        response.headers["WWW-Authenticate"] = "Bearer"
    return response, error.status


def _handle_unexpected(exc: BaseException, *, debug_mode: bool) -> tuple[Response, HTTPStatus]:
    subject = getattr(g, "subject", None)
    if debug_mode:
        query = sanitize_query_params(dict(request.args))
        logger.opt(exception=exc).error(
            f"Unhandled exception: {request.method} {request.path} "
            f"user={subject}, query={query}, body_size={len(request.data)}"
        )
    else:
        logger.opt(exception=exc).error(
            f"Unhandled {type(exc).__name__} on {request.method} {request.path}"
        )
    return jsonify({"error": GENERIC_ERROR_MESSAGE}), HTTPStatus.INTERNAL_SERVER_ERROR


def register_error_handler(app: Flask, *, debug_mode: bool = False) -> None:
    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        if exc.status >= HTTPStatus.INTERNAL_SERVER_ERROR:
            logger.opt(exception=exc).error(
                f"Application error {exc.code} on {request.method} {request.path}"
            )
        else:
            logger.info(
                f"Handled application error {exc.code} on {request.method} {request.path}"
                + (f" context={dict(exc.context)}" if exc.context else "")
            )
        return handle_app_error(exc)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        # Failures raised outside the view (e.g. in after_request hooks) reach us wrapped.
        if isinstance(exc, InternalServerError):
            original = exc.original_exception
            if isinstance(original, AppError):
                return handle_app_error(original)
            return _handle_unexpected(original or exc, debug_mode=debug_mode)
        response = jsonify({"error": exc.name})
        valid_methods = getattr(exc, "valid_methods", None)
        if valid_methods:
            response.headers["Allow"] = ", ".join(valid_methods)
        return response, exc.code or HTTPStatus.INTERNAL_SERVER_ERROR

    @app.errorhandler(Exception)
    def _handle_exception(exc: Exception):
        return _handle_unexpected(exc, debug_mode=debug_mode)


__all__ = ["GENERIC_ERROR_MESSAGE", "handle_app_error", "register_error_handler"]
