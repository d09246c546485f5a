from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, datetime, timedelta

import pytest
from flask import Flask
from flask.testing import FlaskClient
from loguru import logger

from employee_api.app import create_app
from employee_api.infrastructure.auth import JwtTokenService
from employee_api.infrastructure.repositories.employees import InMemoryEmployeeRepository
from employee_api.shared.config import DEFAULT_JWT_SECRET, AppConfig


class FakeClock:
    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock(datetime(2025, 1, 1, 12, 0, 0, tzinfo=UTC))


@pytest.fixture()
def config() -> AppConfig:
    return AppConfig(_env_file=None, app_env="test", jwt_secret=DEFAULT_JWT_SECRET)


@pytest.fixture()
def tokens(clock: FakeClock) -> JwtTokenService:
    return JwtTokenService(DEFAULT_JWT_SECRET, clock=clock)


@pytest.fixture()
def store() -> InMemoryEmployeeRepository:
    return InMemoryEmployeeRepository()


@pytest.fixture()
def app(
    config: AppConfig, store: InMemoryEmployeeRepository, tokens: JwtTokenService
) -> Flask:
    return create_app(config, employee_repository=store, token_service=tokens)


@pytest.fixture()
def client(app: Flask) -> Iterator[FlaskClient]:
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def auth_headers(client: FlaskClient) -> dict[str, str]:
    response = client.post("/login", json={"username": "admin", "password": "password"})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.get_json()['token']}"}


@pytest.fixture()
def log_messages() -> Iterator[list[str]]:
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(str(message)), format="{message}")
    yield messages
    logger.remove(handler_id)
