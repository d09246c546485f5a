# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus
from time import perf_counter
from typing import Any

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from employee_api.domain.employees.entities import Employee
from employee_api.domain.employees.repositories import EmployeeRepository
from employee_api.infrastructure.auth import AuthGate, current_subject
from employee_api.interfaces.http.dto.employees import EmployeeDTO, EmployeePayloadDTO
from employee_api.shared.errors.validation import raise_validation_error
from employee_api.shared.logging import logger


def _serialize(employee: Employee) -> dict[str, Any]:
    return EmployeeDTO.model_validate(employee, from_attributes=True).model_dump()


def _read_payload() -> EmployeePayloadDTO:
    try:
        return EmployeePayloadDTO.model_validate(request.get_json(silent=True) or {})
    except ValidationError as exc:
        raise_validation_error(exc)


class EmployeesController:
    def __init__(self, *, employees: EmployeeRepository, auth_gate: AuthGate) -> None:
        self._employees = employees
        self._auth_gate = auth_gate

    def list_employees(self) -> Response:
        items = [_serialize(employee) for employee in self._employees.list()]
        logger.debug(f"employees.list: ok (n={len(items)})")
        return jsonify(items)

    def get(self, employee_id: int) -> Response:
        return jsonify(_serialize(self._employees.get(employee_id)))

    def create(self) -> tuple[Response, int, dict[str, str]]:
        t0 = perf_counter()
        dto = _read_payload()
        employee = self._employees.create(dto.name, dto.position)

        dt = (perf_counter() - t0) * 1000
        logger.info(f"employees.create: ok (id={employee.id}, dt_ms={dt:.0f})")
        return (
            jsonify(_serialize(employee)),
            HTTPStatus.CREATED,
            {"Location": f"/employees/{employee.id}"},
        )

    def update(self, employee_id: int) -> Response:
        dto = _read_payload()
        employee = self._employees.update(employee_id, dto.name, dto.position)
        logger.info(f"employees.update: ok (id={employee_id}, user={current_subject()})")
        return jsonify(_serialize(employee))

    def delete(self, employee_id: int) -> tuple[str, int]:
        self._employees.delete(employee_id)
        logger.info(f"employees.delete: ok (id={employee_id}, user={current_subject()})")
        return "", HTTPStatus.NO_CONTENT

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("employees", __name__)
        bp.add_url_rule("/employees", view_func=self.list_employees, methods=["GET"])
        bp.add_url_rule("/employees", view_func=self.create, methods=["POST"])
        bp.add_url_rule(
            "/employees/<int:employee_id>",
            view_func=self.get,
            methods=["GET"],
        )
        bp.add_url_rule(
            "/employees/<int:employee_id>",
            view_func=self._auth_gate.protect(self.update),
            methods=["PUT"],
        )
        bp.add_url_rule(
            "/employees/<int:employee_id>",
            view_func=self._auth_gate.protect(self.delete),
            methods=["DELETE"],
        )
        return bp
