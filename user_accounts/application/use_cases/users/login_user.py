# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets

from user_accounts.domain.users.entities import HashedSecret
from user_accounts.domain.users.exceptions import InvalidCredentialsError
from user_accounts.domain.users.repositories import AccountStore, PasswordHasher, TokenCodec
from user_accounts.shared.logging import logger


class LoginUserUseCase:
    def __init__(
        self,
        *,
        accounts: AccountStore,
        password_hasher: PasswordHasher,
        tokens: TokenCodec,
        session_ttl_seconds: int,
    ) -> None:
        self._accounts = accounts
        self._password_hasher = password_hasher
        self._tokens = tokens
        self._session_ttl_seconds = session_ttl_seconds
        # Unknown usernames pay the same verify cost as wrong passwords.
        self._dummy_hash: HashedSecret = password_hasher.hash(secrets.token_urlsafe(16))

    def execute(self, username: str, password: str) -> str:
        account = self._accounts.find_account_by_username(username)
        stored = account.password_hash if account is not None else self._dummy_hash
        password_valid = self._password_hasher.verify(password, stored)

        if account is None or not password_valid:
            logger.warning(f"auth.login: invalid credentials for username={username}")
            raise InvalidCredentialsError()

        logger.info(f"auth.login: ok user_id={account.id}")
        return self._tokens.issue(str(account.id), self._session_ttl_seconds)
