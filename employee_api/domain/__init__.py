# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .employees import Employee, EmployeeNotFoundError, InvalidEmployeeError
from .exceptions import DomainError, InvariantViolation
from .users import InvalidTokenError, TokenClaims

__all__ = [
    "DomainError",
    "Employee",
    "EmployeeNotFoundError",
    "InvalidEmployeeError",
    "InvalidTokenError",
    "InvariantViolation",
    "TokenClaims",
]
