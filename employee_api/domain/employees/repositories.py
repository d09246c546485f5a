# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import Employee


class EmployeeRepository(Protocol):
    def list(self) -> list[Employee]: ...
    def get(self, employee_id: int) -> Employee: ...
    def create(self, name: object, position: object) -> Employee: ...
    def update(self, employee_id: int, name: object, position: object) -> Employee: ...
    def delete(self, employee_id: int) -> Employee: ...
