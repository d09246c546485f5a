# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import hmac

from employee_api.domain.users.exceptions import InvalidCredentialsError
from employee_api.domain.users.repositories import CredentialVerifier, TokenService
from employee_api.shared.logging import logger

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "password"


class StaticCredentialVerifier:
    """Accepts exactly one hardcoded username/password pair."""

    def __init__(self, username: str = ADMIN_USERNAME, password: str = ADMIN_PASSWORD) -> None:
        self._username = username.encode()
        self._password = password.encode()

    def verify(self, username: str, password: str) -> bool:
        user_ok = hmac.compare_digest(username.encode(), self._username)
        password_ok = hmac.compare_digest(password.encode(), self._password)
        return user_ok and password_ok


class LoginUserUseCase:
    def __init__(
        self,
        *,
        credentials: CredentialVerifier,
        tokens: TokenService,
    ) -> None:
        self._credentials = credentials
        self._tokens = tokens

    def execute(self, username: str, password: str) -> str:
        if not self._credentials.verify(username, password):
            logger.warning(f"auth.login: rejected username={username}")
            raise InvalidCredentialsError()

        return self._tokens.issue(username)
