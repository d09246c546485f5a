# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""OpenAPI 3.1 description of the HTTP surface.

Component schemas come straight from the pydantic DTOs, so the document
cannot drift from what the controllers accept and return.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from employee_api import __version__
from employee_api.interfaces.http.dto.auth import LoginRequestDTO, LoginResponseDTO
from employee_api.interfaces.http.dto.employees import EmployeeDTO, EmployeePayloadDTO

BEARER_DESCRIPTION = (
    "Enter 'Bearer' [space] and then your valid JWT token.\n\n"
    "Use /login with username: admin, password: password to get a token."
)

_SCHEMAS: dict[str, type[BaseModel]] = {
    "Employee": EmployeeDTO,
    "EmployeePayload": EmployeePayloadDTO,
    "LoginRequest": LoginRequestDTO,
    "LoginResponse": LoginResponseDTO,
}


def _ref(name: str) -> dict[str, str]:
    return {"$ref": f"#/components/schemas/{name}"}


def _json(schema: dict[str, Any], description: str) -> dict[str, Any]:
    return {"description": description, "content": {"application/json": {"schema": schema}}}


def _error(description: str) -> dict[str, Any]:
    return _json(_ref("Error"), description)


_ID_PARAM = {
    "name": "id",
    "in": "path",
    "required": True,
    "schema": {"type": "integer"},
}
_SECURED = [{"Bearer": []}]


def build_openapi_spec() -> dict[str, Any]:
    schemas = {
        name: model.model_json_schema(ref_template="#/components/schemas/{model}")
        for name, model in _SCHEMAS.items()
    }
    schemas["Error"] = {
        "type": "object",
        "required": ["error"],
        "properties": {"error": {"type": "string"}},
    }

    return {
        "openapi": "3.1.0",
        "info": {"title": "Employee API", "version": __version__},
        "paths": {
            "/employees": {
                "get": {
                    "tags": ["employees"],
                    "summary": "List employees",
                    "responses": {
                        "200": _json({"type": "array", "items": _ref("Employee")}, "All employees"),
                    },
                },
                "post": {
                    "tags": ["employees"],
                    "summary": "Create an employee",
                    "requestBody": {
                        "required": True,
                        "content": {"application/json": {"schema": _ref("EmployeePayload")}},
                    },
                    "responses": {
                        "201": _json(_ref("Employee"), "Created"),
                        "400": _error("Name and position are required"),
                    },
                },
            },
            "/employees/{id}": {
                "parameters": [_ID_PARAM],
                "get": {
                    "tags": ["employees"],
                    "summary": "Fetch one employee",
                    "responses": {
                        "200": _json(_ref("Employee"), "The employee"),
                        "404": _error("No such employee"),
                    },
                },
                "put": {
                    "tags": ["employees"],
                    "summary": "Replace an employee's name and position",
                    "security": _SECURED,
                    "requestBody": {
                        "required": True,
                        "content": {"application/json": {"schema": _ref("EmployeePayload")}},
                    },
                    "responses": {
                        "200": _json(_ref("Employee"), "Updated"),
                        "400": _error("Name and position are required"),
                        "401": _error("Missing, invalid or expired token"),
                        "404": _error("No such employee"),
                    },
                },
                "delete": {
                    "tags": ["employees"],
                    "summary": "Delete an employee",
                    "security": _SECURED,
                    "responses": {
                        "204": {"description": "Deleted"},
                        "401": _error("Missing, invalid or expired token"),
                        "404": _error("No such employee"),
                    },
                },
            },
            "/login": {
                "post": {
                    "tags": ["auth"],
                    "summary": "Exchange credentials for a bearer token",
                    "requestBody": {
                        "required": True,
                        "content": {"application/json": {"schema": _ref("LoginRequest")}},
                    },
                    "responses": {
                        "200": _json(_ref("LoginResponse"), "Token valid for one hour"),
                        "400": _error("Malformed payload"),
                        "401": _error("Invalid username or password"),
                    },
                },
            },
            "/health": {
                "get": {
                    "tags": ["misc"],
                    "summary": "Liveness probe",
                    "responses": {"200": {"description": "Service is up"}},
                },
            },
        },
        "components": {
            "schemas": schemas,
            "securitySchemes": {
                "Bearer": {
                    "type": "http",
                    "scheme": "bearer",
                    "bearerFormat": "JWT",
                    "description": BEARER_DESCRIPTION,
                },
            },
        },
    }


__all__ = ["BEARER_DESCRIPTION", "build_openapi_spec"]
