from __future__ import annotations

import pytest

from employee_api.shared.config import DEFAULT_JWT_SECRET, AppConfig


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("APP_ENV", "JWT_SECRET", "TOKEN_TTL_SECONDS", "DEBUG_LOGGING", "API_PORT"):
        monkeypatch.delenv(name, raising=False)

    config = AppConfig(_env_file=None)

    assert config.jwt_secret == DEFAULT_JWT_SECRET
    assert config.token_ttl_seconds == 3600
    assert config.debug_logging is False
    assert config.port == 5000
    assert config.security.origins() == ["*"]


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JWT_SECRET", "x" * 40)
    monkeypatch.setenv("TOKEN_TTL_SECONDS", "120")
    monkeypatch.setenv("DEBUG_LOGGING", "yes")
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example")

    config = AppConfig(_env_file=None)

    assert config.jwt_secret == "x" * 40
    assert config.token_ttl_seconds == 120
    assert config.debug_logging is True
    assert config.security.origins() == ["https://a.example", "https://b.example"]


def test_production_refuses_default_secret(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("JWT_SECRET", raising=False)

    with pytest.raises(SystemExit):
        AppConfig(_env_file=None, app_env="production")


def test_production_refuses_short_secret() -> None:
    with pytest.raises(SystemExit):
        AppConfig(_env_file=None, app_env="prod", jwt_secret="short")


def test_production_accepts_strong_secret(capsys: pytest.CaptureFixture[str]) -> None:
    config = AppConfig(_env_file=None, app_env="production", jwt_secret="s" * 48)

    assert config.is_production()
    assert "CORS allows wildcard" in capsys.readouterr().err
