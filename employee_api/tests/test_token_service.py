from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from employee_api.domain.users import InvalidTokenError
from employee_api.infrastructure.auth import JwtTokenService
from employee_api.shared.config import DEFAULT_JWT_SECRET

OTHER_SECRET = "another_secret_key_that_is_long_enough_0987"


def test_issue_embeds_subject_id_and_one_hour_expiry(tokens: JwtTokenService, clock) -> None:
    token = tokens.issue("admin")

    claims = tokens.validate(token)

    assert claims.subject == "admin"
    assert claims.token_id
    assert claims.expires_at == clock.now + timedelta(hours=1)
    assert claims.issued_at == clock.now


def test_each_token_has_unique_id(tokens: JwtTokenService) -> None:
    first = tokens.validate(tokens.issue("admin"))
    second = tokens.validate(tokens.issue("admin"))

    assert first.token_id != second.token_id


def test_token_valid_until_just_before_expiry(tokens: JwtTokenService, clock) -> None:
    token = tokens.issue("admin")

    clock.advance(timedelta(minutes=59, seconds=59))

    assert tokens.validate(token).subject == "admin"


def test_fractional_issue_time_keeps_full_hour(clock) -> None:
    clock.now = clock.now.replace(microsecond=900_000)
    service = JwtTokenService(DEFAULT_JWT_SECRET, clock=clock)
    token = service.issue("admin")

    clock.advance(timedelta(minutes=59, seconds=59, microseconds=-200_000))
    assert service.validate(token).subject == "admin"

    clock.advance(timedelta(seconds=2))
    with pytest.raises(InvalidTokenError) as exc_info:
        service.validate(token)
    assert exc_info.value.reason == "expired"


def test_token_rejected_at_expiry(tokens: JwtTokenService, clock) -> None:
    token = tokens.issue("admin")

    clock.advance(timedelta(hours=1))

    with pytest.raises(InvalidTokenError) as exc_info:
        tokens.validate(token)
    assert exc_info.value.reason == "expired"


def test_token_signed_with_other_secret_rejected(clock) -> None:
    foreign = JwtTokenService(OTHER_SECRET, clock=clock).issue("admin")
    service = JwtTokenService(DEFAULT_JWT_SECRET, clock=clock)

    with pytest.raises(InvalidTokenError) as exc_info:
        service.validate(foreign)
    assert exc_info.value.reason == "bad_signature"


def test_any_holder_of_the_secret_can_validate(clock) -> None:
    issuer = JwtTokenService(DEFAULT_JWT_SECRET, clock=clock)
    validator = JwtTokenService(DEFAULT_JWT_SECRET, clock=clock)

    assert validator.validate(issuer.issue("admin")).subject == "admin"


def test_tampered_payload_rejected(tokens: JwtTokenService) -> None:
    header, payload, signature = tokens.issue("admin").split(".")
    forged_payload = jwt.utils.base64url_encode(b'{"sub":"root","jti":"x","exp":9999999999}')

    with pytest.raises(InvalidTokenError):
        tokens.validate(f"{header}.{forged_payload.decode()}.{signature}")


@pytest.mark.parametrize("token", ["", "not-a-token", "a.b.c"])
def test_malformed_token_rejected(tokens: JwtTokenService, token: str) -> None:
    with pytest.raises(InvalidTokenError) as exc_info:
        tokens.validate(token)
    assert exc_info.value.reason == "malformed"


def test_missing_claims_rejected(tokens: JwtTokenService, clock) -> None:
    exp = int((clock.now + timedelta(hours=1)).timestamp())
    token = jwt.encode({"sub": "admin", "exp": exp}, DEFAULT_JWT_SECRET, algorithm="HS256")

    with pytest.raises(InvalidTokenError) as exc_info:
        tokens.validate(token)
    assert exc_info.value.reason == "missing_claims"


def test_unsigned_token_rejected(tokens: JwtTokenService, clock) -> None:
    exp = int((clock.now + timedelta(hours=1)).timestamp())
    token = jwt.encode({"sub": "admin", "jti": "x", "exp": exp}, None, algorithm="none")

    with pytest.raises(InvalidTokenError):
        tokens.validate(token)


def test_empty_secret_refused() -> None:
    with pytest.raises(ValueError):
        JwtTokenService("")


def test_default_clock_uses_wall_time() -> None:
    service = JwtTokenService(DEFAULT_JWT_SECRET, ttl=timedelta(minutes=5))

    claims = service.validate(service.issue("admin"))

    assert claims.expires_at > datetime.now(UTC)
    assert service.ttl == timedelta(minutes=5)
