# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from user_accounts.application.services.password_hashing import WerkzeugPasswordHasher
from user_accounts.application.services.reset_tokens import ResetTokenStore
from user_accounts.application.services.token_codec import JwtTokenCodec
from user_accounts.application.use_cases.users.get_user import GetUserUseCase, ListUsersUseCase
from user_accounts.application.use_cases.users.login_user import LoginUserUseCase
from user_accounts.application.use_cases.users.register_user import RegisterUserUseCase
from user_accounts.application.use_cases.users.request_password_reset import (
    RequestPasswordResetUseCase,
)
from user_accounts.application.use_cases.users.reset_password import ResetPasswordUseCase
from user_accounts.domain.users.repositories import AvatarResolver
from user_accounts.infrastructure.avatars import GithubAvatarResolver, StaticAvatarResolver
from user_accounts.infrastructure.notifications import LoggingResetNotifier
from user_accounts.infrastructure.repositories.users.sqlalchemy_account_store import (
    SqlAlchemyAccountStore,
)
from user_accounts.interfaces.http.auth_gate import AuthGate
from user_accounts.interfaces.http.controllers.auth_controller import AuthController
from user_accounts.interfaces.http.controllers.misc_controller import MiscController
from user_accounts.interfaces.http.controllers.users_controller import UsersController
from user_accounts.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig) -> None:
        self._config = config

    @property
    def config(self) -> AppConfig:
        return self._config

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(method=self._config.auth.password_hash_method)

    @cached_property
    def token_codec(self) -> JwtTokenCodec:
        return JwtTokenCodec(self._config.auth.jwt_secret)

    @cached_property
    def account_store(self) -> SqlAlchemyAccountStore:
        return SqlAlchemyAccountStore()

    @cached_property
    def reset_notifier(self) -> LoggingResetNotifier:
        return LoggingResetNotifier(
            reveal_tokens=self._config.debug_logging and not self._config.is_production()
        )

    @cached_property
    def avatar_resolver(self) -> AvatarResolver:
        if self._config.avatar_lookup_enabled:
            return GithubAvatarResolver(timeout=self._config.avatar_lookup_timeout)
        return StaticAvatarResolver()

    @cached_property
    def reset_token_store(self) -> ResetTokenStore:
        return ResetTokenStore(
            accounts=self.account_store,
            notifier=self.reset_notifier,
            ttl=timedelta(minutes=self._config.auth.reset_token_ttl_minutes),
            token_length=self._config.auth.reset_token_length,
        )

    @cached_property
    def auth_gate(self) -> AuthGate:
        return AuthGate(tokens=self.token_codec)

    # Use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            accounts=self.account_store,
            password_hasher=self.password_hasher,
            tokens=self.token_codec,
            avatars=self.avatar_resolver,
            session_ttl_seconds=self._config.auth.session_ttl_seconds,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            accounts=self.account_store,
            password_hasher=self.password_hasher,
            tokens=self.token_codec,
            session_ttl_seconds=self._config.auth.session_ttl_seconds,
        )

    @cached_property
    def request_password_reset_use_case(self) -> RequestPasswordResetUseCase:
        return RequestPasswordResetUseCase(
            accounts=self.account_store, reset_tokens=self.reset_token_store
        )

    @cached_property
    def reset_password_use_case(self) -> ResetPasswordUseCase:
        return ResetPasswordUseCase(
            reset_tokens=self.reset_token_store, password_hasher=self.password_hasher
        )

    @cached_property
    def get_user_use_case(self) -> GetUserUseCase:
        return GetUserUseCase(accounts=self.account_store)

    @cached_property
    def list_users_use_case(self) -> ListUsersUseCase:
        return ListUsersUseCase(accounts=self.account_store)

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            request_reset_use_case=self.request_password_reset_use_case,
            reset_password_use_case=self.reset_password_use_case,
        )

    @cached_property
    def users_controller(self) -> UsersController:
        return UsersController(
            gate=self.auth_gate,
            get_user_use_case=self.get_user_use_case,
            list_users_use_case=self.list_users_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController()


container = Container(load_config())
