# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from enum import StrEnum


class ValidationErrorType(StrEnum):
    MISSING = "missing"
    USERNAME_TOO_SHORT = "username_too_short"
    USERNAME_INVALID_CHARS = "username_invalid_chars"
    EMAIL_INVALID = "email_invalid"
    PASSWORD_EMPTY = "password_empty"
    TOKEN_EMPTY = "token_empty"


__all__ = ["ValidationErrorType"]
