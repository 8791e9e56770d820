"""Caller authentication and path parameter parsing for protected routes."""

from uuid import UUID

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import Header

from forum.domain.error import (
    InvalidCredentialError,
    NotFoundError,
    UnauthenticatedError,
)
from forum.domain.service import JWTService
from forum.domain.value import UserId
from forum.interface.error import to_http_exception


def parse_bearer(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header.

    Returns None when the header is absent.

    Raises:
        InvalidCredentialError: If the header is present but not a bearer token
    """
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        raise InvalidCredentialError()
    return token


def require_caller(jwt_service: JWTService, authorization: str | None) -> UserId:
    """Authenticate a request or abort it with 401.

    Args:
        jwt_service: Token verifier
        authorization: Raw ``Authorization`` header value

    Returns:
        Caller's user ID

    Raises:
        HTTPException: 401 with "No token provided" or "Invalid token"
    """
    try:
        return jwt_service.authenticate(parse_bearer(authorization))
    except UnauthenticatedError as e:
        raise to_http_exception(e) from e


@inject
async def current_caller(
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> UserId:
    """FastAPI dependency resolving the authenticated caller.

    Dependencies run before the request body is validated, so an
    unauthenticated request is rejected with 401 whatever its body.
    """
    return require_caller(jwt_service, authorization)


def parse_id(raw: str, resource: str) -> UUID:
    """Parse a resource ID taken from the URL path.

    An ID that is not a UUID cannot name an existing resource.

    Raises:
        HTTPException: 404 "<resource> not found"
    """
    try:
        return UUID(raw)
    except ValueError as e:
        raise to_http_exception(NotFoundError(resource, raw)) from e
