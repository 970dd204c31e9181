# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Protocol

from .entities import Account, HashedSecret, ResetToken, SessionClaims


class AccountStore(Protocol):
    def find_account_by_username(self, username: str) -> Account | None: ...
    def find_account_by_email(self, email: str) -> Account | None: ...
    def find_account_by_id(self, user_id: int) -> Account | None: ...
    def list_accounts(self) -> Sequence[Account]: ...
    def insert_account(self, account: Account) -> Account: ...
    def update_credential(self, user_id: int, password_hash: HashedSecret) -> None: ...
    def insert_reset_token(self, token: ResetToken) -> None: ...
    def find_reset_token_by_value(self, value: str) -> ResetToken | None: ...

    def conditionally_mark_reset_token_used(self, value: str, now: datetime) -> bool:
        """Set ``used`` only if the token is unused and unexpired at ``now``.

        Returns whether a row was updated.
        """
        ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> HashedSecret: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenCodec(Protocol):
    def issue(self, subject: str, ttl_seconds: int) -> str: ...
    def validate(self, token: str) -> SessionClaims: ...


class ResetNotifier(Protocol):
    def notify(self, email: str, reset_token: str) -> None: ...


class AvatarResolver(Protocol):
    def resolve(self, username: str) -> str: ...
