# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any


@dataclass(slots=True)
class AppError(Exception):
    code: str
    status: HTTPStatus
    message: str | None = None
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message or self.code)

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.message or self.code}


class ValidationError(AppError):
    def __init__(
        self,
        code: str = "invalid_input",
        *,
        message: str | None = "Request payload is invalid.",
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code=code,
            status=HTTPStatus.BAD_REQUEST,
            message=message,
            context=context,
        )


class NotFoundError(AppError):
    def __init__(
        self,
        code: str = "not_found",
        *,
        message: str | None = "Resource not found.",
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code=code,
            status=HTTPStatus.NOT_FOUND,
            message=message,
            context=context,
        )


class UnauthenticatedError(AppError):
    def __init__(
        self,
        code: str = "unauthenticated",
        *,
        message: str | None = "Authentication required.",
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code=code,
            status=HTTPStatus.UNAUTHORIZED,
            message=message,
            context=context,
        )
