# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from employee_api.domain.exceptions import DomainError
from employee_api.shared.errors.base import UnauthenticatedError


class InvalidTokenError(DomainError):
    """Raised by the token service; never rendered directly."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class InvalidCredentialsError(UnauthenticatedError):
    def __init__(self) -> None:
        super().__init__(
            code="invalid_credentials",
            message="Invalid username or password.",
        )


class AuthenticationRequiredError(UnauthenticatedError):
    def __init__(self) -> None:
        super().__init__(
            code="authentication_required",
            message="Authentication required.",
        )


class InvalidTokenAuthError(UnauthenticatedError):
    def __init__(self, reason: str) -> None:
        super().__init__(
            code="invalid_token",
            message="Invalid or expired token.",
            context={"reason": reason},
        )
