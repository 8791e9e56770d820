"""Authentication routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from forum.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LogInRequest,
    LogInResponse,
    LogInUseCase,
    RefreshTokenRequest,
    RefreshTokenResponse,
    RefreshTokenUseCase,
    SignUpRequest,
    SignUpUseCase,
    UpdateProfileRequest,
    UpdateProfileUseCase,
    UserInfo,
)
from forum.domain.error import DomainError
from forum.domain.value import UserIcon, UserId
from forum.interface.api.security import current_caller
from forum.interface.error import to_http_exception

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


class SignUpAPIResponse(BaseModel):
    """API response for a successful sign-up."""

    message: str


class UpdateProfileAPIRequest(BaseModel):
    """API request for updating the caller's profile."""

    username: str | None = None
    icon: UserIcon | None = None


@router.post(
    "/sign-up", response_model=SignUpAPIResponse, status_code=status.HTTP_201_CREATED
)
async def sign_up(
    request: SignUpRequest,
    sign_up_use_case: FromDishka[SignUpUseCase],
) -> SignUpAPIResponse:
    """Register a new user.

    Returns:
        Confirmation message

    Raises:
        HTTPException: 400 if a field is missing or the username is taken
    """
    try:
        result = await sign_up_use_case.execute(request)
    except DomainError as e:
        logfire.info("Sign-up rejected", error=str(e))
        raise to_http_exception(e) from e
    return SignUpAPIResponse(message=result.message)


@router.post("/log-in", response_model=LogInResponse)
async def log_in(
    request: LogInRequest,
    log_in_use_case: FromDishka[LogInUseCase],
) -> LogInResponse:
    """Exchange username and password for an access/refresh token pair.

    Raises:
        HTTPException: 400 with a generic message if the credentials are wrong
    """
    try:
        return await log_in_use_case.execute(request)
    except DomainError as e:
        raise to_http_exception(e) from e


@router.post("/refresh-token", response_model=RefreshTokenResponse)
async def refresh_token(
    request: RefreshTokenRequest,
    refresh_token_use_case: FromDishka[RefreshTokenUseCase],
) -> RefreshTokenResponse:
    """Trade a refresh token for a new token pair.

    Raises:
        HTTPException: 400 if no token was sent, 401 if it is not a valid
            refresh token
    """
    try:
        return await refresh_token_use_case.execute(request)
    except DomainError as e:
        raise to_http_exception(e) from e


@router.get("/me", response_model=UserInfo)
async def get_me(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    user_id: UserId = Depends(current_caller),
) -> UserInfo:
    """Get the authenticated user's profile.

    Raises:
        HTTPException: 401 if not authenticated, 404 if the user is gone
    """
    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(user_id=str(user_id))
        )
    except DomainError as e:
        raise to_http_exception(e) from e


@router.put("/profile", response_model=UserInfo)
async def update_profile(
    request: UpdateProfileAPIRequest,
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
    user_id: UserId = Depends(current_caller),
) -> UserInfo:
    """Change the caller's username and/or icon.

    Raises:
        HTTPException: 401 if not authenticated, 400 if the username is
            malformed or taken
    """
    try:
        return await update_profile_use_case.execute(
            UpdateProfileRequest(
                user_id=str(user_id),
                username=request.username,
                icon=request.icon,
            )
        )
    except DomainError as e:
        logfire.info("Profile update rejected", user_id=str(user_id), error=str(e))
        raise to_http_exception(e) from e
