# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from user_accounts.application.services.reset_tokens import ResetTokenStore
from user_accounts.domain.users.repositories import PasswordHasher


class ResetPasswordUseCase:
    def __init__(
        self, *, reset_tokens: ResetTokenStore, password_hasher: PasswordHasher
    ) -> None:
        self._reset_tokens = reset_tokens
        self._password_hasher = password_hasher

    def execute(self, token: str, new_password: str) -> int:
        # Hash first: a hashing failure must not burn the token.
        hashed = self._password_hasher.hash(new_password)
        return self._reset_tokens.consume_reset_token(token, hashed)
