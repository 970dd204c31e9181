# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Bearer-token gate for protected routes.

Per request: no header -> ``MissingCredentialsError``; header present but the
token does not validate -> ``InvalidTokenError``; otherwise the verified
``Identity`` is passed to the view as the ``identity`` keyword argument.
Rejected requests never reach the view.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

from flask import g, request

from user_accounts.domain.users.entities import Identity
from user_accounts.domain.users.exceptions import MissingCredentialsError
from user_accounts.domain.users.repositories import TokenCodec
from user_accounts.shared.errors.base import AppError
from user_accounts.shared.logging import logger, set_subject

BEARER_SCHEME = "bearer"


def extract_bearer_token(authorization: str | None) -> str:
    if not authorization:
        raise MissingCredentialsError()
    scheme, _, token = authorization.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != BEARER_SCHEME or not token or " " in token:
        raise MissingCredentialsError()
    return token


class AuthGate:
    def __init__(self, *, tokens: TokenCodec) -> None:
        self._tokens = tokens

    def authenticate(self, authorization: str | None) -> Identity:
        token = extract_bearer_token(authorization)
        claims = self._tokens.validate(token)
        return Identity.from_claims(claims)

    def protect(self, view: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(view)
        def inner(*args: Any, **kwargs: Any) -> Any:
            try:
                identity = self.authenticate(request.headers.get("Authorization"))
            except AppError as exc:
                logger.warning(f"Auth rejected ({exc.code}) on {request.method} {request.path}")
                raise

            g.user_id = identity.subject
            set_subject(identity.subject)
            logger.debug(f"Auth OK: user={identity.subject} {request.method} {request.path}")
            return view(*args, identity=identity, **kwargs)

        return inner


__all__ = ["AuthGate", "extract_bearer_token"]
