"""Update profile use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import UserService
from forum.domain.value import UserIcon, UserId

from ..base import BaseUseCase
from .user_info import UserInfo


class UpdateProfileRequest(BaseModel):
    """Update profile request. Omitted fields are left unchanged."""

    user_id: str
    username: str | None = None
    icon: UserIcon | None = None


class UpdateProfileUseCase(BaseUseCase[UpdateProfileRequest, UserInfo]):
    """Use case for changing the caller's username and icon."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize update profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateProfileRequest) -> UserInfo:
        """Execute update profile flow.

        Raises:
            NotFoundError: If the user no longer exists
            ValidationError: If the username is malformed
            ConflictError: If the username is taken
        """
        user = await self.user_service.update_profile(
            UserId(UUID(request.user_id)),
            username=request.username,
            icon=request.icon,
        )
        return UserInfo.from_user(user)
