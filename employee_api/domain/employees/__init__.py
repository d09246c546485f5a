# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Employee
from .exceptions import EmployeeNotFoundError, InvalidEmployeeError
from .repositories import EmployeeRepository

__all__ = [
    "Employee",
    "EmployeeNotFoundError",
    "EmployeeRepository",
    "InvalidEmployeeError",
]
