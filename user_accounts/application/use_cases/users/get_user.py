# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from user_accounts.domain.users.entities import Account, Identity
from user_accounts.domain.users.exceptions import UserNotFoundError
from user_accounts.domain.users.repositories import AccountStore
from user_accounts.shared.logging import logger

# Row ids are signed 64-bit integers in every supported backend.
MAX_USER_ID = 2**63 - 1


class GetUserUseCase:
    def __init__(self, *, accounts: AccountStore) -> None:
        self._accounts = accounts

    def execute(self, user_id: int) -> Account:
        logger.info(f"users.fetch: user_id={user_id}")
        if not 1 <= user_id <= MAX_USER_ID:
            raise UserNotFoundError(context={"user_id": user_id})
        account = self._accounts.find_account_by_id(user_id)
        if account is None:
            raise UserNotFoundError(context={"user_id": user_id})
        return account

    def for_identity(self, identity: Identity) -> Account:
        # The token subject is only trusted once it resolves to a stored account.
        user_id = identity.user_id()
        if user_id is None:
            raise UserNotFoundError()
        return self.execute(user_id)


class ListUsersUseCase:
    def __init__(self, *, accounts: AccountStore) -> None:
        self._accounts = accounts

    def execute(self) -> Sequence[Account]:
        return self._accounts.list_accounts()
