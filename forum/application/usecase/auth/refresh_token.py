"""Refresh token use case."""

from pydantic import BaseModel, ConfigDict, Field

from forum.domain.error import ValidationError
from forum.domain.service import JWTService
from forum.util.jwt import TokenType

from ..base import BaseUseCase


class RefreshTokenRequest(BaseModel):
    """Refresh token request.

    Accepts ``refreshToken`` or ``refresh_token`` in the body.
    """

    model_config = ConfigDict(populate_by_name=True)

    refresh_token: str | None = Field(default=None, alias="refreshToken")


class RefreshTokenResponse(BaseModel):
    """New token pair. The refresh token is rotated as well."""

    token: str
    refresh_token: str


class RefreshTokenUseCase(BaseUseCase[RefreshTokenRequest, RefreshTokenResponse]):
    """Use case for trading a refresh token for a fresh token pair."""

    def __init__(self, jwt_service: JWTService) -> None:
        """Initialize refresh token use case.

        Args:
            jwt_service: JWT token domain service
        """
        self.jwt_service = jwt_service

    async def execute(self, request: RefreshTokenRequest) -> RefreshTokenResponse:
        """Execute refresh flow.

        Raises:
            ValidationError: If no refresh token was sent
            InvalidCredentialError: If the refresh token is invalid, expired
                or is actually an access token
        """
        if not request.refresh_token:
            raise ValidationError("missing refresh token")

        user_id = self.jwt_service.verify_token(
            request.refresh_token, expected_type=TokenType.REFRESH
        )
        return RefreshTokenResponse(
            token=self.jwt_service.create_access_token(user_id),
            refresh_token=self.jwt_service.create_refresh_token(user_id),
        )
