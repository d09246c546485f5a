# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Stateless bearer tokens.

Tokens are HS256-signed JWTs carrying ``sub``, ``jti``, ``iat`` and ``exp``.
Nothing is persisted: any process holding the same secret can validate a
token issued by any other, and a token stays valid until it expires.
"""

from __future__ import annotations

import math
import uuid
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import jwt

from employee_api.domain.users.entities import TokenClaims
from employee_api.domain.users.exceptions import InvalidTokenError

ALGORITHM = "HS256"
DEFAULT_TTL = timedelta(hours=1)
_REQUIRED_CLAIMS = ("sub", "jti", "exp")


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenService:
    def __init__(
        self,
        secret: str,
        *,
        ttl: timedelta = DEFAULT_TTL,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if not secret:
            raise ValueError("token signing secret must not be empty")
        if ttl <= timedelta(0):
            raise ValueError("token ttl must be positive")
        self._secret = secret
        self._ttl = ttl
        self._clock = clock

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def issue(self, subject: str) -> str:
        now = self._clock()
        payload = {
            "sub": subject,
            "jti": uuid.uuid4().hex,
            "iat": int(now.timestamp()),
            # Rounded up so the token never lives shorter than the ttl.
            "exp": math.ceil((now + self._ttl).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def validate(self, token: str) -> TokenClaims:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                # Expiry is checked against the injected clock below.
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "verify_nbf": False,
                    "require": list(_REQUIRED_CLAIMS),
                },
            )
        except jwt.MissingRequiredClaimError as exc:
            raise InvalidTokenError("missing_claims") from exc
        except jwt.InvalidSignatureError as exc:
            raise InvalidTokenError("bad_signature") from exc
        except jwt.PyJWTError as exc:
            raise InvalidTokenError("malformed") from exc

        subject = payload.get("sub")
        token_id = payload.get("jti")
        expires = payload.get("exp")
        if not isinstance(subject, str) or not subject or not isinstance(token_id, str):
            raise InvalidTokenError("missing_claims")
        if not isinstance(expires, int | float) or isinstance(expires, bool):
            raise InvalidTokenError("malformed")

        expires_at = datetime.fromtimestamp(expires, UTC)
        if self._clock() >= expires_at:
            raise InvalidTokenError("expired")

        issued = payload.get("iat")
        issued_at = (
            datetime.fromtimestamp(issued, UTC)
            if isinstance(issued, int | float) and not isinstance(issued, bool)
            else expires_at - self._ttl
        )
        return TokenClaims(
            subject=subject,
            token_id=token_id,
            issued_at=issued_at,
            expires_at=expires_at,
        )


__all__ = ["ALGORITHM", "DEFAULT_TTL", "JwtTokenService"]
