"""Authentication use cases."""

from .confirm_password_reset import (
    ConfirmPasswordResetRequest,
    ConfirmPasswordResetUseCase,
)
from .login import LoginRequest, LoginResponse, LoginUseCase
from .request_password_reset import (
    PasswordResetMessage,
    RequestPasswordResetRequest,
    RequestPasswordResetUseCase,
)

__all__ = [
    "ConfirmPasswordResetRequest",
    "ConfirmPasswordResetUseCase",
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
    "PasswordResetMessage",
    "RequestPasswordResetRequest",
    "RequestPasswordResetUseCase",
]
