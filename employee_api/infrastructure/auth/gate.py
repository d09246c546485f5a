# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar, cast

from flask import g, request

from employee_api.domain.users.entities import TokenClaims
from employee_api.domain.users.exceptions import (
    AuthenticationRequiredError,
    InvalidTokenAuthError,
    InvalidTokenError,
)
from employee_api.domain.users.repositories import TokenService
from employee_api.shared.logging import logger

F = TypeVar("F", bound=Callable[..., Any])


def bearer_token(header: str | None) -> str | None:
    if not header:
        return None
    scheme, _, token = header.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token or " " in token:
        return None
    return token


def current_subject() -> str | None:
    return getattr(g, "subject", None)


class AuthGate:
    def __init__(self, tokens: TokenService) -> None:
        self._tokens = tokens

    def authenticate(self, header: str | None) -> TokenClaims:
        token = bearer_token(header)
        if token is None:
            logger.warning(
                f"No bearer token on {request.method} {request.path} "
                f"from {request.headers.get('X-Forwarded-For', request.remote_addr)}"
            )
            raise AuthenticationRequiredError()
        try:
            return self._tokens.validate(token)
        except InvalidTokenError as exc:
            logger.warning(
                f"Auth failed ({exc.reason}) on {request.method} {request.path}"
            )
            raise InvalidTokenAuthError(exc.reason) from exc

    def protect(self, view: F) -> F:
        @wraps(view)
        def inner(*args: Any, **kwargs: Any) -> Any:
            claims = self.authenticate(request.headers.get("Authorization"))
            g.subject = claims.subject
            g.token_claims = claims
            logger.debug(f"Auth OK: user={claims.subject} {request.method} {request.path}")
            return view(*args, **kwargs)

        return cast(F, inner)


__all__ = ["AuthGate", "bearer_token", "current_subject"]
