# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from user_accounts.domain.users.entities import Account
from user_accounts.domain.users.exceptions import UserAlreadyExistsError
from user_accounts.domain.users.repositories import (
    AccountStore,
    AvatarResolver,
    PasswordHasher,
    TokenCodec,
)
from user_accounts.shared.logging import logger


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        accounts: AccountStore,
        password_hasher: PasswordHasher,
        tokens: TokenCodec,
        avatars: AvatarResolver,
        session_ttl_seconds: int,
    ) -> None:
        self._accounts = accounts
        self._password_hasher = password_hasher
        self._tokens = tokens
        self._avatars = avatars
        self._session_ttl_seconds = session_ttl_seconds

    def execute(self, username: str, email: str, password: str) -> tuple[Account, str]:
        existing = self._accounts.find_account_by_username(username)
        if existing:
            logger.warning(f"auth.register: username taken by user_id={existing.id}")
            raise UserAlreadyExistsError(context={"field": "username"})
        if self._accounts.find_account_by_email(email):
            logger.warning("auth.register: email already registered")
            raise UserAlreadyExistsError(context={"field": "email"})

        now = datetime.now(UTC)
        hashed = self._password_hasher.hash(password)
        account = Account(
            id=0,
            username=username,
            email=email,
            password_hash=hashed,
            profile_picture=self._avatars.resolve(username),
            created_at=now,
            updated_at=now,
        )
        persisted = self._accounts.insert_account(account)
        token = self._tokens.issue(str(persisted.id), self._session_ttl_seconds)
        logger.info(f"auth.register: created user_id={persisted.id} username={username}")
        return persisted, token
