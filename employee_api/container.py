"""Application dependency container."""

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from employee_api.application.use_cases.users.login_user import (
    LoginUserUseCase,
    StaticCredentialVerifier,
)
from employee_api.infrastructure.auth import AuthGate, JwtTokenService
from employee_api.infrastructure.repositories.employees import InMemoryEmployeeRepository
from employee_api.interfaces.http.controllers import (
    AuthController,
    DocsController,
    EmployeesController,
    MiscController,
)
from employee_api.interfaces.http.openapi import build_openapi_spec
from employee_api.shared.config import AppConfig


class Container:
    """Owns one store and one token service per application instance."""

    def __init__(
        self,
        config: AppConfig,
        *,
        employee_repository: InMemoryEmployeeRepository | None = None,
        token_service: JwtTokenService | None = None,
    ) -> None:
        self._config = config
        if employee_repository is not None:
            self.employee_repository = employee_repository
        if token_service is not None:
            self.token_service = token_service

    @cached_property
    def employee_repository(self) -> InMemoryEmployeeRepository:
        return InMemoryEmployeeRepository()

    @cached_property
    def token_service(self) -> JwtTokenService:
        return JwtTokenService(
            self._config.jwt_secret,
            ttl=timedelta(seconds=self._config.token_ttl_seconds),
        )

    @cached_property
    def auth_gate(self) -> AuthGate:
        return AuthGate(self.token_service)

    @cached_property
    def credential_verifier(self) -> StaticCredentialVerifier:
        return StaticCredentialVerifier()

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            credentials=self.credential_verifier,
            tokens=self.token_service,
        )

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(login_use_case=self.login_user_use_case)

    @cached_property
    def employees_controller(self) -> EmployeesController:
        return EmployeesController(
            employees=self.employee_repository,
            auth_gate=self.auth_gate,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(employees=self.employee_repository)

    @cached_property
    def docs_controller(self) -> DocsController:
        return DocsController(spec=build_openapi_spec())
