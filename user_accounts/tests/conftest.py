from __future__ import annotations

import os
import tempfile
import threading
from dataclasses import replace
from datetime import UTC, datetime, timedelta

import pytest

_TMP = tempfile.mkdtemp(prefix="user-accounts-tests-")

os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP, 'test.db')}"
os.environ["LOG_FILE"] = os.path.join(_TMP, "app.log")
os.environ["JWT_SECRET"] = "test-secret-0123456789abcdef0123456789abcdef"
os.environ["AVATAR_LOOKUP_ENABLED"] = "0"
os.environ["PASSWORD_HASH_METHOD"] = "pbkdf2:sha256:1000"
os.environ["APP_ENV"] = "test"

TEST_SECRET = os.environ["JWT_SECRET"]


class FakeClock:
    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2025, 1, 1, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


# Imported after the environment is prepared: the package reads its
# configuration at import time.
from user_accounts.domain.users.entities import (  # noqa: E402
    Account,
    HashedSecret,
    ResetToken,
)
from user_accounts.domain.users.exceptions import UserAlreadyExistsError  # noqa: E402
from user_accounts.domain.users.repositories import (  # noqa: E402
    AccountStore,
    PasswordHasher,
    ResetNotifier,
)


class InMemoryAccountStore(AccountStore):
    def __init__(self) -> None:
        self.accounts: dict[int, Account] = {}
        self.tokens: dict[str, ResetToken] = {}
        self._seq = 1
        self._lock = threading.Lock()

    def find_account_by_username(self, username: str) -> Account | None:
        return next((a for a in self.accounts.values() if a.username == username), None)

    def find_account_by_email(self, email: str) -> Account | None:
        return next((a for a in self.accounts.values() if a.email == email), None)

    def find_account_by_id(self, user_id: int) -> Account | None:
        return self.accounts.get(user_id)

    def list_accounts(self) -> list[Account]:
        return [self.accounts[k] for k in sorted(self.accounts)]

    def insert_account(self, account: Account) -> Account:
        if self.find_account_by_username(account.username):
            raise UserAlreadyExistsError()
        stored = replace(account, id=self._seq)
        self._seq += 1
        self.accounts[stored.id] = stored
        return stored

    def add(self, user_id: int, username: str = "alice", email: str | None = None) -> Account:
        account = Account(
            id=user_id,
            username=username,
            email=email or f"{username}@example.com",
            password_hash=HashedSecret("hashed:old"),
            profile_picture="https://placehold.co/512x512",
            created_at=datetime(2025, 1, 1, tzinfo=UTC),
            updated_at=datetime(2025, 1, 1, tzinfo=UTC),
        )
        self.accounts[user_id] = account
        self._seq = max(self._seq, user_id + 1)
        return account

    def update_credential(self, user_id: int, password_hash: HashedSecret) -> None:
        self.accounts[user_id] = replace(self.accounts[user_id], password_hash=password_hash)

    def insert_reset_token(self, token: ResetToken) -> None:
        self.tokens[token.value] = token

    def find_reset_token_by_value(self, value: str) -> ResetToken | None:
        return self.tokens.get(value)

    def conditionally_mark_reset_token_used(self, value: str, now: datetime) -> bool:
        with self._lock:
            token = self.tokens.get(value)
            if token is None or token.used or now > token.expires_at:
                return False
            self.tokens[value] = replace(token, used=True)
            return True


class RecordingNotifier(ResetNotifier):
    def __init__(self) -> None:
        self.sent: list[tuple[str, str]] = []

    def notify(self, email: str, reset_token: str) -> None:
        self.sent.append((email, reset_token))


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> HashedSecret:
        return HashedSecret(f"hashed:{password}")

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


@pytest.fixture()
def store() -> InMemoryAccountStore:
    return InMemoryAccountStore()


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def hasher() -> DeterministicHasher:
    return DeterministicHasher()
