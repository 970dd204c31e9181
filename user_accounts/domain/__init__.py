# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .users.entities import Account, HashedSecret, Identity, ResetToken, SessionClaims
from .users.exceptions import (
    InvalidCredentialsError,
    InvalidTokenError,
    MissingCredentialsError,
    ResetTokenRejectedError,
    TokenExpiredOrUsedError,
    TokenNotFoundError,
    UserAlreadyExistsError,
    UserNotFoundError,
)

__all__ = [
    "Account",
    "HashedSecret",
    "Identity",
    "ResetToken",
    "SessionClaims",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "MissingCredentialsError",
    "ResetTokenRejectedError",
    "TokenExpiredOrUsedError",
    "TokenNotFoundError",
    "UserAlreadyExistsError",
    "UserNotFoundError",
]
