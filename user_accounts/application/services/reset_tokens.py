# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Password reset token lifecycle.

A token is created unused with a fixed lifetime, can be consumed at most once
before it expires, and is inert afterwards. Issuing a new token leaves older
outstanding tokens for the same account valid.
"""

from __future__ import annotations

import secrets
import string
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from user_accounts.domain.users.entities import HashedSecret, ResetToken
from user_accounts.domain.users.exceptions import (
    TokenExpiredOrUsedError,
    TokenNotFoundError,
    UserNotFoundError,
)
from user_accounts.domain.users.repositories import AccountStore, ResetNotifier
from user_accounts.shared.logging import logger

TOKEN_ALPHABET = string.ascii_letters + string.digits
MIN_TOKEN_LENGTH = 30
DEFAULT_TTL = timedelta(minutes=30)


def _utcnow() -> datetime:
    return datetime.now(UTC)


def generate_reset_token(length: int = MIN_TOKEN_LENGTH) -> str:
    if length < MIN_TOKEN_LENGTH:
        raise ValueError(f"reset tokens need at least {MIN_TOKEN_LENGTH} characters")
    return "".join(secrets.choice(TOKEN_ALPHABET) for _ in range(length))


class ResetTokenStore:
    def __init__(
        self,
        *,
        accounts: AccountStore,
        notifier: ResetNotifier,
        ttl: timedelta = DEFAULT_TTL,
        token_length: int = MIN_TOKEN_LENGTH,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if token_length < MIN_TOKEN_LENGTH:
            raise ValueError(f"reset tokens need at least {MIN_TOKEN_LENGTH} characters")
        self._accounts = accounts
        self._notifier = notifier
        self._ttl = ttl
        self._token_length = token_length
        self._clock = clock

    def issue_reset_token(self, user_id: int) -> tuple[str, datetime]:
        account = self._accounts.find_account_by_id(user_id)
        if account is None:
            raise UserNotFoundError()

        value = generate_reset_token(self._token_length)
        expires_at = self._clock() + self._ttl
        self._accounts.insert_reset_token(
            ResetToken(value=value, user_id=user_id, expires_at=expires_at, used=False)
        )
        logger.info(f"reset_token.issue: user_id={user_id} exp={expires_at.isoformat()}")

        try:
            self._notifier.notify(account.email, value)
        except Exception:
            logger.exception(f"reset_token.issue: notifier failed for user_id={user_id}")

        return value, expires_at

    def consume_reset_token(self, token_value: str, new_hashed_secret: HashedSecret) -> int:
        token = self._accounts.find_reset_token_by_value(token_value)
        if token is None:
            logger.warning("reset_token.consume: unknown token")
            raise TokenNotFoundError()

        now = self._clock()
        if not token.is_consumable(now):
            logger.warning(
                f"reset_token.consume: rejected user_id={token.user_id} "
                f"used={token.used} expired={now > token.expires_at}"
            )
            raise TokenExpiredOrUsedError()

        if not self._accounts.conditionally_mark_reset_token_used(token_value, now):
            logger.warning(f"reset_token.consume: lost race user_id={token.user_id}")
            raise TokenExpiredOrUsedError()

        self._accounts.update_credential(token.user_id, new_hashed_secret)
        logger.info(f"reset_token.consume: ok user_id={token.user_id}")
        return token.user_id
