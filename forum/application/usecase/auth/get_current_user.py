"""Get current user use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import UserService
from forum.domain.value import UserId

from ..base import BaseUseCase
from .user_info import UserInfo


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    user_id: str  # From the verified access token


class GetCurrentUserUseCase(BaseUseCase[GetCurrentUserRequest, UserInfo]):
    """Use case for getting the authenticated user's profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> UserInfo:
        """Execute get current user flow.

        Tokens are trusted on decode, so a valid token can outlive its
        user; that case surfaces here as NotFoundError.

        Raises:
            NotFoundError: If the user no longer exists
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        return UserInfo.from_user(user)
