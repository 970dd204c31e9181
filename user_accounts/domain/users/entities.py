# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import NewType

HashedSecret = NewType("HashedSecret", str)


@dataclass(slots=True, frozen=True)
class Account:

    id: int
    username: str
    email: str
    password_hash: HashedSecret
    profile_picture: str
    created_at: datetime
    updated_at: datetime


@dataclass(slots=True, frozen=True)
class ResetToken:
    """Single-use password reset credential owned by ``user_id``."""

    value: str
    user_id: int
    expires_at: datetime
    used: bool = False

    def is_consumable(self, now: datetime) -> bool:
        return not self.used and now <= self.expires_at


@dataclass(slots=True, frozen=True)
class SessionClaims:

    subject: str
    expiry: datetime


@dataclass(slots=True, frozen=True)
class Identity:
    """Verified caller, handed to protected handlers by the auth gate."""

    subject: str
    expires_at: datetime

    @classmethod
    def from_claims(cls, claims: SessionClaims) -> Identity:
        return cls(subject=claims.subject, expires_at=claims.expiry)

    def user_id(self) -> int | None:
        try:
            return int(self.subject)
        except ValueError:
            return None
