"""Password hashing strategies."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from user_accounts.domain.users.entities import HashedSecret
from user_accounts.domain.users.repositories import PasswordHasher
from user_accounts.shared.errors.base import HashingError

DEFAULT_METHOD = "scrypt:32768:8:1"
DEFAULT_SALT_LENGTH = 16


class WerkzeugPasswordHasher(PasswordHasher):
    """Salted one-way hashing with a fixed work factor.

    The work factor lives in the method string (``scrypt:N:r:p`` or
    ``pbkdf2:sha256:iterations``) and is stored alongside every hash, so old
    hashes keep verifying after the default changes.
    """

    def __init__(
        self, method: str = DEFAULT_METHOD, salt_length: int = DEFAULT_SALT_LENGTH
    ) -> None:
        self._method = method
        self._salt_length = salt_length

    def hash(self, password: str) -> HashedSecret:
        try:
            return HashedSecret(
                generate_password_hash(password, method=self._method, salt_length=self._salt_length)
            )
        except (ValueError, TypeError, AttributeError) as exc:
            raise HashingError(f"password hashing failed with method {self._method!r}: {exc}") from exc

    def verify(self, password: str, hashed: str) -> bool:
        parts = hashed.split("$", 2) if isinstance(hashed, str) else []
        if len(parts) != 3 or not all(parts):
            raise HashingError("stored password hash is malformed")
        try:
            return bool(check_password_hash(hashed, password))
        except (ValueError, TypeError) as exc:
            raise HashingError(f"stored password hash is malformed: {exc}") from exc
