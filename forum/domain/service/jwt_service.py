"""JWT token domain service."""

from datetime import timedelta
from uuid import UUID

import logfire

from forum.config import AuthSettings
from forum.domain.error import InvalidCredentialError, UnauthenticatedError
from forum.domain.value import UserId
from forum.util.jwt import JWTError, TokenType, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for issuing and verifying bearer tokens.

    Verification is a pure function of the token and the shared secret;
    it does not check that the user still exists.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_access_token(self, user_id: UserId) -> str:
        """Create a short-lived access token for a user."""
        ttl = timedelta(minutes=self.auth_settings.access_token_expiry_minutes)
        with logfire.span("jwt_service.create_access_token", user_id=str(user_id)):
            return create_token(str(user_id), TokenType.ACCESS, ttl, self.auth_settings)

    def create_refresh_token(self, user_id: UserId) -> str:
        """Create a long-lived refresh token for a user."""
        ttl = timedelta(days=self.auth_settings.refresh_token_expiry_days)
        with logfire.span("jwt_service.create_refresh_token", user_id=str(user_id)):
            return create_token(str(user_id), TokenType.REFRESH, ttl, self.auth_settings)

    def verify_token(
        self, token: str, expected_type: TokenType = TokenType.ACCESS
    ) -> UserId:
        """Verify a token and extract the user ID it asserts.

        Args:
            token: JWT token string
            expected_type: Token kind the caller requires

        Returns:
            The user ID encoded in the token

        Raises:
            InvalidCredentialError: If the token is malformed, expired,
                signed with another key, or of the wrong type
        """
        with logfire.span("jwt_service.verify_token", expected_type=expected_type.value):
            try:
                payload = verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.info("JWT verification failed", error=str(e))
                raise InvalidCredentialError() from e

            if payload.type is not expected_type:
                logfire.info(
                    "JWT of unexpected type",
                    expected=expected_type.value,
                    actual=payload.type.value,
                )
                raise InvalidCredentialError()

            try:
                return UserId(UUID(payload.user_id))
            except ValueError as e:
                raise InvalidCredentialError() from e

    def authenticate(self, token: str | None) -> UserId:
        """Resolve the caller of a request from its bearer token.

        Args:
            token: Bearer token, or None if the request carried none

        Returns:
            Caller's user ID

        Raises:
            UnauthenticatedError: If no token was supplied
            InvalidCredentialError: If the token cannot be accepted
        """
        if not token:
            raise UnauthenticatedError()
        return self.verify_token(token, TokenType.ACCESS)
