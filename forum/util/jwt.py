"""JWT token utilities."""

from datetime import datetime, timedelta, timezone
from enum import Enum

import jwt
from pydantic import BaseModel

from forum.config import AuthSettings


class TokenType(str, Enum):
    """Kind of credential a token represents."""

    ACCESS = "access"
    REFRESH = "refresh"


class TokenPayload(BaseModel):
    """JWT token payload."""

    user_id: str
    type: TokenType
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    user_id: str,
    token_type: TokenType,
    ttl: timedelta,
    settings: AuthSettings,
) -> str:
    """Create a signed JWT token for the user.

    Args:
        user_id: User ID
        token_type: Access or refresh token
        ttl: Time until the token expires
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + ttl

    payload = {
        "user_id": user_id,
        "type": token_type.value,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "user_id", "type"]},
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except (jwt.InvalidTokenError, ValueError):
        raise JWTError("Invalid token")
