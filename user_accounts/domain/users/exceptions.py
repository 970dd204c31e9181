# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from user_accounts.shared.errors.base import DomainError


class UserAlreadyExistsError(DomainError):
    code = "user_already_exists"
    status = HTTPStatus.CONFLICT


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    status = HTTPStatus.UNAUTHORIZED


class UserNotFoundError(DomainError):
    code = "user_not_found"
    status = HTTPStatus.NOT_FOUND


class MissingCredentialsError(DomainError):
    code = "missing_credentials"
    status = HTTPStatus.UNAUTHORIZED


class InvalidTokenError(DomainError):
    code = "invalid_token"
    status = HTTPStatus.UNAUTHORIZED


class ResetTokenRejectedError(DomainError):
    # Not-found and expired/used share one code so callers cannot tell them apart.
    code = "invalid_or_expired_token"
    status = HTTPStatus.BAD_REQUEST


class TokenNotFoundError(ResetTokenRejectedError):
    pass


class TokenExpiredOrUsedError(ResetTokenRejectedError):
    pass
