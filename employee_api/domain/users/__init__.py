# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import TokenClaims
from .exceptions import (
    AuthenticationRequiredError,
    InvalidCredentialsError,
    InvalidTokenAuthError,
    InvalidTokenError,
)
from .repositories import CredentialVerifier, TokenService

__all__ = [
    "AuthenticationRequiredError",
    "CredentialVerifier",
    "InvalidCredentialsError",
    "InvalidTokenAuthError",
    "InvalidTokenError",
    "TokenClaims",
    "TokenService",
]
