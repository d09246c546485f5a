# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .in_memory_employee_repository import (
    DEFAULT_SEED,
    InMemoryEmployeeRepository,
    validate_employee_fields,
)

__all__ = ["DEFAULT_SEED", "InMemoryEmployeeRepository", "validate_employee_fields"]
