from __future__ import annotations

import pytest

from user_accounts.application.services.password_hashing import WerkzeugPasswordHasher
from user_accounts.shared.errors.base import HashingError


@pytest.fixture()
def werkzeug_hasher() -> WerkzeugPasswordHasher:
    # Low iteration count keeps the suite fast; production uses scrypt.
    return WerkzeugPasswordHasher(method="pbkdf2:sha256:1000")


@pytest.mark.parametrize("secret", ["secret123", "", "пароль-ñ-🔑", "x" * 128])
def test_verify_accepts_own_hash(werkzeug_hasher: WerkzeugPasswordHasher, secret: str) -> None:
    assert werkzeug_hasher.verify(secret, werkzeug_hasher.hash(secret)) is True


def test_verify_rejects_other_secret(werkzeug_hasher: WerkzeugPasswordHasher) -> None:
    stored = werkzeug_hasher.hash("secret123")

    assert werkzeug_hasher.verify("secret124", stored) is False
    assert werkzeug_hasher.verify("", stored) is False


def test_hash_is_salted(werkzeug_hasher: WerkzeugPasswordHasher) -> None:
    first = werkzeug_hasher.hash("secret123")
    second = werkzeug_hasher.hash("secret123")

    assert first != second
    assert werkzeug_hasher.verify("secret123", first)
    assert werkzeug_hasher.verify("secret123", second)


def test_hash_never_contains_raw_secret(werkzeug_hasher: WerkzeugPasswordHasher) -> None:
    assert "correct horse" not in werkzeug_hasher.hash("correct horse")


def test_default_method_is_scrypt() -> None:
    stored = WerkzeugPasswordHasher().hash("secret123")

    assert stored.startswith("scrypt:32768:8:1$")
    assert WerkzeugPasswordHasher().verify("secret123", stored)


@pytest.mark.parametrize("stored", ["", "not-a-hash", "pbkdf2:sha256:1000$salt", "$$"])
def test_verify_malformed_hash_raises(werkzeug_hasher: WerkzeugPasswordHasher, stored: str) -> None:
    with pytest.raises(HashingError):
        werkzeug_hasher.verify("secret123", stored)


def test_verify_unknown_method_raises(werkzeug_hasher: WerkzeugPasswordHasher) -> None:
    with pytest.raises(HashingError):
        werkzeug_hasher.verify("secret123", "md5-ish$salt$abcdef")


def test_hash_with_unknown_method_raises() -> None:
    with pytest.raises(HashingError):
        WerkzeugPasswordHasher(method="rot13").hash("secret123")
