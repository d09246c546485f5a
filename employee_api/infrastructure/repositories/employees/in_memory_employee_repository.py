# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterable
from threading import Lock

from employee_api.domain.employees.entities import Employee
from employee_api.domain.employees.exceptions import (
    EmployeeNotFoundError,
    InvalidEmployeeError,
)
from employee_api.domain.exceptions import InvariantViolation
from employee_api.shared.logging import logger

DEFAULT_SEED: tuple[Employee, ...] = (
    Employee(id=1, name="Alice Smith", position="Developer"),
    Employee(id=2, name="Bob Johnson", position="Manager"),
)


def _blank(value: object) -> bool:
    return not isinstance(value, str) or not value.strip()


def validate_employee_fields(name: object, position: object) -> tuple[str, str]:
    missing = [
        field
        for field, value in (("name", name), ("position", position))
        if _blank(value)
    ]
    if missing:
        raise InvalidEmployeeError(missing)
    return str(name), str(position)


class InMemoryEmployeeRepository:
    """Process-local employee store.

    A single lock guards both the record map and the id counter, so every
    operation is atomic and ids handed out by ``create`` strictly increase.
    Ids freed by ``delete`` are never reissued.
    """

    def __init__(self, seed: Iterable[Employee] = DEFAULT_SEED) -> None:
        self._lock = Lock()
        self._employees: dict[int, Employee] = {}
        for employee in seed:
            if employee.id < 1:
                raise InvariantViolation("seed ids must be positive", field="id")
            if employee.id in self._employees:
                raise InvariantViolation(f"duplicate seed id {employee.id}", field="id")
            validate_employee_fields(employee.name, employee.position)
            self._employees[employee.id] = employee
        self._next_id = max(self._employees, default=0) + 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._employees)

    def list(self) -> list[Employee]:
        with self._lock:
            snapshot = list(self._employees.values())
        return sorted(snapshot, key=lambda employee: employee.id)

    def get(self, employee_id: int) -> Employee:
        with self._lock:
            employee = self._employees.get(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)
        return employee

    def create(self, name: object, position: object) -> Employee:
        name, position = validate_employee_fields(name, position)
        with self._lock:
            employee = Employee(id=self._next_id, name=name, position=position)
            self._next_id += 1
            self._employees[employee.id] = employee
        logger.debug(f"employees.store: created id={employee.id}")
        return employee

    def update(self, employee_id: int, name: object, position: object) -> Employee:
        name, position = validate_employee_fields(name, position)
        updated = Employee(id=employee_id, name=name, position=position)
        with self._lock:
            if employee_id not in self._employees:
                raise EmployeeNotFoundError(employee_id)
            self._employees[employee_id] = updated
        logger.debug(f"employees.store: updated id={employee_id}")
        return updated

    def delete(self, employee_id: int) -> Employee:
        with self._lock:
            removed = self._employees.pop(employee_id, None)
        if removed is None:
            raise EmployeeNotFoundError(employee_id)
        logger.debug(f"employees.store: deleted id={employee_id}")
        return removed


__all__ = ["DEFAULT_SEED", "InMemoryEmployeeRepository", "validate_employee_fields"]
