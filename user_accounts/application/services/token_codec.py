# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Stateless session tokens.

Tokens are HS256 JWTs carrying ``sub`` (the account id as a string) and
``exp`` (Unix seconds). Nothing is stored server side, so a token stays valid
until it expires.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import jwt

from user_accounts.domain.users.entities import SessionClaims
from user_accounts.domain.users.exceptions import InvalidTokenError
from user_accounts.domain.users.repositories import TokenCodec
from user_accounts.shared.errors.base import SigningError
from user_accounts.shared.logging import logger

ALGORITHM = "HS256"


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenCodec(TokenCodec):
    def __init__(self, secret: str, *, clock: Callable[[], datetime] = _utcnow) -> None:
        self._secret = secret
        self._clock = clock

    def issue(self, subject: str, ttl_seconds: int) -> str:
        if not self._secret:
            raise SigningError("session signing secret is not configured")

        expiry = self._clock() + timedelta(seconds=ttl_seconds)
        claims = {"sub": str(subject), "exp": int(expiry.timestamp())}
        try:
            return jwt.encode(claims, self._secret, algorithm=ALGORITHM)
        except (jwt.PyJWTError, TypeError, ValueError) as exc:
            raise SigningError(f"failed to sign session token: {exc}") from exc

    def validate(self, token: str) -> SessionClaims:
        if not self._secret:
            raise SigningError("session signing secret is not configured")
        if not token:
            raise InvalidTokenError()

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={"require": ["sub", "exp"], "verify_exp": False},
            )
        except jwt.InvalidTokenError as exc:
            logger.debug(f"token.validate: rejected ({type(exc).__name__})")
            raise InvalidTokenError() from exc

        subject = payload.get("sub")
        exp = payload.get("exp")
        if not isinstance(subject, str) or not subject:
            raise InvalidTokenError()
        if not isinstance(exp, int) or isinstance(exp, bool):
            raise InvalidTokenError()

        try:
            expiry = datetime.fromtimestamp(exp, UTC)
        except (OverflowError, OSError, ValueError) as exc:
            raise InvalidTokenError() from exc

        # The injected clock is the only time source; exp == now is already expired.
        if expiry <= self._clock():
            raise InvalidTokenError()

        return SessionClaims(subject=subject, expiry=expiry)
