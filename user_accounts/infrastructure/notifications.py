# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Stand-in for reset e-mail delivery: the notification goes to the log."""

from __future__ import annotations

from user_accounts.domain.users.repositories import ResetNotifier
from user_accounts.shared.logging import logger


class LoggingResetNotifier(ResetNotifier):
    def __init__(self, *, reveal_tokens: bool = False) -> None:
        # reveal_tokens is for local development only
        self._reveal_tokens = reveal_tokens

    def notify(self, email: str, reset_token: str) -> None:
        shown = reset_token if self._reveal_tokens else f"{reset_token[:4]}…"
        logger.info(f"notify.password_reset: to={email} code={shown}")
