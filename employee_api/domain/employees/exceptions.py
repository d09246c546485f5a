# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from employee_api.shared.errors.base import NotFoundError, ValidationError


class EmployeeNotFoundError(NotFoundError):
    def __init__(self, employee_id: int) -> None:
        super().__init__(
            code="employee_not_found",
            message=f"Employee with ID {employee_id} not found.",
            context={"employee_id": employee_id},
        )


class InvalidEmployeeError(ValidationError):
    def __init__(self, fields: list[str]) -> None:
        super().__init__(
            code="employee_invalid",
            message="Name and Position are required.",
            context={"fields": fields},
        )
