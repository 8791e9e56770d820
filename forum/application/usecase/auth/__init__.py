"""Authentication use cases."""

from .get_current_user import GetCurrentUserRequest, GetCurrentUserUseCase
from .log_in import LogInRequest, LogInResponse, LogInUseCase
from .refresh_token import (
    RefreshTokenRequest,
    RefreshTokenResponse,
    RefreshTokenUseCase,
)
from .sign_up import SignUpRequest, SignUpResponse, SignUpUseCase
from .update_profile import UpdateProfileRequest, UpdateProfileUseCase
from .user_info import UserInfo

__all__ = [
    "GetCurrentUserRequest",
    "GetCurrentUserUseCase",
    "LogInRequest",
    "LogInResponse",
    "LogInUseCase",
    "RefreshTokenRequest",
    "RefreshTokenResponse",
    "RefreshTokenUseCase",
    "SignUpRequest",
    "SignUpResponse",
    "SignUpUseCase",
    "UpdateProfileRequest",
    "UpdateProfileUseCase",
    "UserInfo",
]
