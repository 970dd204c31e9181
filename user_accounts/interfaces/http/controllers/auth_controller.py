# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import TypeVar

from flask import Blueprint, Response, jsonify, request
from pydantic import BaseModel, ValidationError

from user_accounts.application.use_cases.users.login_user import LoginUserUseCase
from user_accounts.application.use_cases.users.register_user import RegisterUserUseCase
from user_accounts.application.use_cases.users.request_password_reset import (
    RequestPasswordResetUseCase,
)
from user_accounts.application.use_cases.users.reset_password import ResetPasswordUseCase
from user_accounts.interfaces.http.dto.auth import (
    ForgotPasswordRequestDTO,
    MessageDTO,
    ResetPasswordRequestDTO,
    SignInRequestDTO,
    SignInResponseDTO,
    SignUpRequestDTO,
    SignUpResponseDTO,
)
from user_accounts.interfaces.http.dto.users import UserDTO
from user_accounts.shared.errors.validation import raise_validation_error
from user_accounts.shared.logging import logger

RESET_REQUESTED_MESSAGE = "If the address is registered, a password reset email has been sent"
RESET_DONE_MESSAGE = "Password has been reset successfully"

_DTO = TypeVar("_DTO", bound=BaseModel)


def _parse(dto_type: type[_DTO]) -> _DTO:
    try:
        return dto_type.model_validate(request.get_json(silent=True) or {})
    except ValidationError as exc:
        raise_validation_error(exc)


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        request_reset_use_case: RequestPasswordResetUseCase,
        reset_password_use_case: ResetPasswordUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._request_reset_use_case = request_reset_use_case
        self._reset_password_use_case = reset_password_use_case

    def sign_up(self) -> tuple[Response, int]:
        dto = _parse(SignUpRequestDTO)
        user, token = self._register_use_case.execute(dto.username, dto.email, dto.password)

        payload = SignUpResponseDTO(token=token, user=UserDTO.model_validate(user))
        logger.info(f"auth.sign_up: ok user_id={user.id}")
        return jsonify(payload.model_dump(mode="json")), 200

    def sign_in(self) -> tuple[Response, int]:
        dto = _parse(SignInRequestDTO)
        token = self._login_use_case.execute(dto.username, dto.password)

        logger.info(f"auth.sign_in: ok username={dto.username}")
        return jsonify(SignInResponseDTO(token=token).model_dump()), 200

    def forgot_password(self) -> tuple[Response, int]:
        dto = _parse(ForgotPasswordRequestDTO)
        issued = self._request_reset_use_case.execute(dto.email.strip())

        logger.info(f"auth.forgot_password: handled issued={issued}")
        return jsonify(MessageDTO(message=RESET_REQUESTED_MESSAGE).model_dump()), 200

    def reset_password(self) -> tuple[Response, int]:
        dto = _parse(ResetPasswordRequestDTO)
        user_id = self._reset_password_use_case.execute(dto.token, dto.new_password)

        logger.info(f"auth.reset_password: ok user_id={user_id}")
        return jsonify(MessageDTO(message=RESET_DONE_MESSAGE).model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/users")
        bp.add_url_rule("/signup", view_func=self.sign_up, methods=["POST"])
        bp.add_url_rule("/signin", view_func=self.sign_in, methods=["POST"])
        bp.add_url_rule("/forgot-password", view_func=self.forgot_password, methods=["POST"])
        bp.add_url_rule("/reset-password", view_func=self.reset_password, methods=["POST"])
        return bp
