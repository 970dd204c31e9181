# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Use-case for starting a password reset from an e-mail address."""

from __future__ import annotations

from user_accounts.application.services.reset_tokens import ResetTokenStore
from user_accounts.domain.users.repositories import AccountStore
from user_accounts.shared.logging import logger


class RequestPasswordResetUseCase:
    def __init__(self, *, accounts: AccountStore, reset_tokens: ResetTokenStore) -> None:
        self._accounts = accounts
        self._reset_tokens = reset_tokens

    def execute(self, email: str) -> bool:
        """Issue a reset token for the account owning ``email``.

        Returns whether a token was issued. The HTTP layer answers the same
        way either way so that registered addresses cannot be enumerated.
        """
        account = self._accounts.find_account_by_email(email)
        if account is None:
            logger.info("auth.forgot_password: no account for address")
            return False

        self._reset_tokens.issue_reset_token(account.id)
        return True
