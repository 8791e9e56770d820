"""Log-in use case."""

from pydantic import BaseModel

from forum.domain.service import JWTService, UserService

from ..base import BaseUseCase
from .user_info import UserInfo


class LogInRequest(BaseModel):
    """Log-in request."""

    username: str | None = None
    password: str | None = None


class LogInResponse(BaseModel):
    """Log-in response with an access/refresh token pair."""

    token: str
    refresh_token: str
    user: UserInfo


class LogInUseCase(BaseUseCase[LogInRequest, LogInResponse]):
    """Use case for exchanging a username and password for tokens."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize log-in use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LogInRequest) -> LogInResponse:
        """Execute log-in flow.

        Steps:
        1. Check username and password (one generic error for both)
        2. Issue an access token and a refresh token

        Raises:
            ValidationError: If a field is missing or the credentials are wrong
        """
        user = await self.user_service.check_credentials(
            request.username or "", request.password or ""
        )
        return LogInResponse(
            token=self.jwt_service.create_access_token(user.id),
            refresh_token=self.jwt_service.create_refresh_token(user.id),
            user=UserInfo.from_user(user),
        )
