# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify

from user_accounts.application.use_cases.users.get_user import GetUserUseCase, ListUsersUseCase
from user_accounts.domain.users.entities import Identity
from user_accounts.interfaces.http.auth_gate import AuthGate
from user_accounts.interfaces.http.dto.users import UserDTO


class UsersController:
    def __init__(
        self,
        *,
        gate: AuthGate,
        get_user_use_case: GetUserUseCase,
        list_users_use_case: ListUsersUseCase,
    ) -> None:
        self._gate = gate
        self._get_user_use_case = get_user_use_case
        self._list_users_use_case = list_users_use_case

    def list_users(self, *, identity: Identity) -> tuple[Response, int]:
        users = self._list_users_use_case.execute()
        return jsonify([UserDTO.model_validate(u).model_dump(mode="json") for u in users]), 200

    def current_user(self, *, identity: Identity) -> tuple[Response, int]:
        user = self._get_user_use_case.for_identity(identity)
        return jsonify(UserDTO.model_validate(user).model_dump(mode="json")), 200

    def get_user(self, user_id: int, *, identity: Identity) -> tuple[Response, int]:
        user = self._get_user_use_case.execute(user_id)
        return jsonify(UserDTO.model_validate(user).model_dump(mode="json")), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("users", __name__, url_prefix="/api/users")
        bp.add_url_rule("/", view_func=self._gate.protect(self.list_users), methods=["GET"])
        bp.add_url_rule("/me", view_func=self._gate.protect(self.current_user), methods=["GET"])
        bp.add_url_rule(
            "/<int:user_id>", view_func=self._gate.protect(self.get_user), methods=["GET"]
        )
        return bp
