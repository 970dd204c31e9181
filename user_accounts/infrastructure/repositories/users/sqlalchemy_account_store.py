# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError

from user_accounts.domain.users.entities import Account as DomainAccount
from user_accounts.domain.users.entities import HashedSecret
from user_accounts.domain.users.entities import ResetToken as DomainResetToken
from user_accounts.domain.users.exceptions import UserAlreadyExistsError
from user_accounts.domain.users.repositories import AccountStore
from user_accounts.infrastructure.db.models import PASSWORD_RESET, User, UserToken
from user_accounts.infrastructure.db.session import session_scope


def _as_utc(value: datetime) -> datetime:
    # SQLite hands timezone-aware columns back as naive UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _to_domain(row: User) -> DomainAccount:
    return DomainAccount(
        id=row.id,
        username=row.username,
        email=row.email,
        password_hash=HashedSecret(row.hashed_password),
        profile_picture=row.profile_picture,
        created_at=_as_utc(row.created_at),
        updated_at=_as_utc(row.updated_at),
    )


class SqlAlchemyAccountStore(AccountStore):
    def find_account_by_username(self, username: str) -> DomainAccount | None:
        with session_scope() as session:
            row = session.query(User).filter(User.username == username).first()
            return _to_domain(row) if row else None

    def find_account_by_email(self, email: str) -> DomainAccount | None:
        with session_scope() as session:
            row = session.query(User).filter(User.email == email).first()
            return _to_domain(row) if row else None

    def find_account_by_id(self, user_id: int) -> DomainAccount | None:
        with session_scope() as session:
            row = session.get(User, user_id)
            return _to_domain(row) if row else None

    def list_accounts(self) -> Sequence[DomainAccount]:
        with session_scope() as session:
            rows = session.query(User).order_by(User.id.asc()).all()
            return [_to_domain(row) for row in rows]

    def insert_account(self, account: DomainAccount) -> DomainAccount:
        try:
            with session_scope() as session:
                row = User(
                    username=account.username,
                    email=account.email,
                    hashed_password=account.password_hash,
                    profile_picture=account.profile_picture,
                    created_at=account.created_at,
                    updated_at=account.updated_at,
                )
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except IntegrityError as exc:
            # A concurrent sign-up won the unique constraint.
            raise UserAlreadyExistsError() from exc

    def update_credential(self, user_id: int, password_hash: HashedSecret) -> None:
        with session_scope() as session:
            session.execute(
                update(User)
                .where(User.id == user_id)
                .values(hashed_password=password_hash, updated_at=datetime.now(UTC))
            )

    def insert_reset_token(self, token: DomainResetToken) -> None:
        with session_scope() as session:
            session.add(
                UserToken(
                    user_id=token.user_id,
                    token=token.value,
                    token_type=PASSWORD_RESET,
                    expires_at=token.expires_at,
                    used=token.used,
                )
            )

    def find_reset_token_by_value(self, value: str) -> DomainResetToken | None:
        with session_scope() as session:
            row = (
                session.query(UserToken)
                .filter(UserToken.token == value, UserToken.token_type == PASSWORD_RESET)
                .first()
            )
            if not row:
                return None
            return DomainResetToken(
                value=row.token,
                user_id=row.user_id,
                expires_at=_as_utc(row.expires_at),
                used=bool(row.used),
            )

    def conditionally_mark_reset_token_used(self, value: str, now: datetime) -> bool:
        with session_scope() as session:
            result = session.execute(
                update(UserToken)
                .where(
                    UserToken.token == value,
                    UserToken.token_type == PASSWORD_RESET,
                    UserToken.used.is_(False),
                    UserToken.expires_at >= now,
                )
                .values(used=True)
                .execution_options(synchronize_session=False)
            )
            return result.rowcount == 1
