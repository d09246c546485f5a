# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import TokenClaims


class TokenService(Protocol):
    def issue(self, subject: str) -> str: ...
    def validate(self, token: str) -> TokenClaims: ...


class CredentialVerifier(Protocol):
    def verify(self, username: str, password: str) -> bool: ...
