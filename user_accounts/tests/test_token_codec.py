from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from user_accounts.application.services.token_codec import JwtTokenCodec
from user_accounts.domain.users.exceptions import InvalidTokenError
from user_accounts.shared.errors.base import SigningError

from conftest import TEST_SECRET, FakeClock


@pytest.fixture()
def codec() -> JwtTokenCodec:
    return JwtTokenCodec(TEST_SECRET)


def test_validate_returns_issued_subject(codec: JwtTokenCodec) -> None:
    token = codec.issue("42", 60)

    claims = codec.validate(token)

    assert claims.subject == "42"
    assert claims.expiry > datetime.now(UTC)


def test_claims_are_sub_and_exp(codec: JwtTokenCodec) -> None:
    token = codec.issue("7", 120)

    payload = jwt.decode(token, TEST_SECRET, algorithms=["HS256"])

    assert set(payload) == {"sub", "exp"}
    assert payload["sub"] == "7"
    assert isinstance(payload["exp"], int)


def test_negative_ttl_is_rejected(codec: JwtTokenCodec) -> None:
    token = codec.issue("42", -1)

    with pytest.raises(InvalidTokenError):
        codec.validate(token)


def test_token_rejected_once_clock_passes_expiry(clock: FakeClock) -> None:
    clock.now = datetime.now(UTC)
    codec = JwtTokenCodec(TEST_SECRET, clock=clock)
    token = codec.issue("42", 60)

    assert codec.validate(token).subject == "42"

    clock.advance(seconds=60)
    with pytest.raises(InvalidTokenError):
        codec.validate(token)


def test_expiry_follows_injected_clock_only(clock: FakeClock) -> None:
    # The fake clock sits in 2025, so by wall time this token expired long ago.
    codec = JwtTokenCodec(TEST_SECRET, clock=clock)
    token = codec.issue("42", 60)

    assert codec.validate(token).subject == "42"

    clock.advance(seconds=59)
    assert codec.validate(token).subject == "42"

    clock.advance(seconds=1)
    with pytest.raises(InvalidTokenError):
        codec.validate(token)


def test_out_of_range_expiry_is_rejected(codec: JwtTokenCodec) -> None:
    token = jwt.encode({"sub": "42", "exp": 10**20}, TEST_SECRET, algorithm="HS256")

    with pytest.raises(InvalidTokenError):
        codec.validate(token)


def test_mutated_signature_is_rejected(codec: JwtTokenCodec) -> None:
    token = codec.issue("42", 60)
    header, payload, signature = token.split(".")
    flipped = ("A" if signature[0] != "A" else "B") + signature[1:]

    with pytest.raises(InvalidTokenError):
        codec.validate(f"{header}.{payload}.{flipped}")


def test_mutated_payload_is_rejected(codec: JwtTokenCodec) -> None:
    token = codec.issue("42", 60)
    forged = JwtTokenCodec("another-secret-0123456789abcdef0123456789").issue("1", 60)
    header, _, signature = token.split(".")
    _, forged_payload, _ = forged.split(".")

    with pytest.raises(InvalidTokenError):
        codec.validate(f"{header}.{forged_payload}.{signature}")


def test_token_signed_with_other_secret_is_rejected(codec: JwtTokenCodec) -> None:
    token = JwtTokenCodec("another-secret-0123456789abcdef0123456789").issue("42", 60)

    with pytest.raises(InvalidTokenError):
        codec.validate(token)


@pytest.mark.parametrize("token", ["", "garbage", "a.b.c", "Bearer x.y.z"])
def test_malformed_token_is_rejected(codec: JwtTokenCodec, token: str) -> None:
    with pytest.raises(InvalidTokenError):
        codec.validate(token)


def test_token_without_subject_is_rejected(codec: JwtTokenCodec) -> None:
    exp = int((datetime.now(UTC) + timedelta(minutes=5)).timestamp())
    token = jwt.encode({"exp": exp}, TEST_SECRET, algorithm="HS256")

    with pytest.raises(InvalidTokenError):
        codec.validate(token)


def test_token_without_expiry_is_rejected(codec: JwtTokenCodec) -> None:
    token = jwt.encode({"sub": "42"}, TEST_SECRET, algorithm="HS256")

    with pytest.raises(InvalidTokenError):
        codec.validate(token)


def test_unsigned_token_is_rejected(codec: JwtTokenCodec) -> None:
    exp = int((datetime.now(UTC) + timedelta(minutes=5)).timestamp())
    token = jwt.encode({"sub": "42", "exp": exp}, None, algorithm="none")

    with pytest.raises(InvalidTokenError):
        codec.validate(token)


def test_empty_secret_cannot_sign() -> None:
    with pytest.raises(SigningError):
        JwtTokenCodec("").issue("42", 60)
