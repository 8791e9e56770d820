"""Sign-up use case."""

from pydantic import BaseModel

from forum.domain.service import UserService

from ..base import BaseUseCase


class SignUpRequest(BaseModel):
    """Sign-up request."""

    username: str | None = None
    password: str | None = None


class SignUpResponse(BaseModel):
    """Sign-up response."""

    message: str
    user_id: str


class SignUpUseCase(BaseUseCase[SignUpRequest, SignUpResponse]):
    """Use case for registering a new user."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize sign-up use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: SignUpRequest) -> SignUpResponse:
        """Execute sign-up flow.

        Raises:
            ValidationError: If username or password is missing or malformed
            ConflictError: If the username is taken
        """
        user = await self.user_service.sign_up(
            request.username or "", request.password or ""
        )
        return SignUpResponse(message="successfully signed up user", user_id=str(user.id))
