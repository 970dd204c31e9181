from __future__ import annotations

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

from user_accounts.shared.errors.validation_types import ValidationErrorType

from .users import UserDTO


class SignUpRequestDTO(BaseModel):
    username: str = Field(max_length=64)
    email: str = Field(max_length=255)
    password: str = Field(max_length=128)

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise PydanticCustomError(
                ValidationErrorType.MISSING,
                "Username cannot be empty",
                {}
            )

        if len(value) < 3:
            raise PydanticCustomError(
                ValidationErrorType.USERNAME_TOO_SHORT,
                "Username must contain at least 3 characters",
                {"min_length": 3}
            )

        if any(ch.isspace() for ch in value):
            raise PydanticCustomError(
                ValidationErrorType.USERNAME_INVALID_CHARS,
                "Username cannot contain whitespace",
                {}
            )

        return value

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        value = value.strip()
        local, at, domain = value.partition("@")
        if not at or not local or not domain:
            raise PydanticCustomError(
                ValidationErrorType.EMAIL_INVALID,
                "Email must look like name@domain",
                {}
            )
        return value

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError(
                ValidationErrorType.PASSWORD_EMPTY,
                "Password cannot be empty",
                {}
            )
        return value


class SignInRequestDTO(BaseModel):
    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1, max_length=128)

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        # Sign-up stores the stripped form.
        value = value.strip()
        if not value:
            raise PydanticCustomError(
                ValidationErrorType.MISSING,
                "Username cannot be empty",
                {}
            )
        return value


class ForgotPasswordRequestDTO(BaseModel):
    email: str = Field(min_length=3, max_length=255)


class ResetPasswordRequestDTO(BaseModel):
    token: str = Field(max_length=128)
    new_password: str = Field(max_length=128)

    @field_validator("token")
    @classmethod
    def validate_token(cls, value: str) -> str:
        if not value.strip():
            raise PydanticCustomError(
                ValidationErrorType.TOKEN_EMPTY,
                "Reset token cannot be empty",
                {}
            )
        return value.strip()

    @field_validator("new_password")
    @classmethod
    def validate_new_password(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError(
                ValidationErrorType.PASSWORD_EMPTY,
                "Password cannot be empty",
                {}
            )
        return value


class SignUpResponseDTO(BaseModel):
    token: str
    user: UserDTO


class SignInResponseDTO(BaseModel):
    token: str


class MessageDTO(BaseModel):
    ok: bool = True
    message: str
