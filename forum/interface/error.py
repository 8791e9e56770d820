"""Interface layer error translation.

Domain errors are mapped onto HTTP status codes here and nowhere else.
Every error body has the shape ``{"message": "..."}``.
"""

from fastapi import HTTPException, status

from forum.domain.error import (
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    UnauthenticatedError,
)


def to_http_exception(error: DomainError) -> HTTPException:
    """Translate a domain error into an HTTPException.

    Duplicate usernames are reported as 400, not 409, for compatibility
    with existing clients.
    """
    if isinstance(error, UnauthenticatedError):
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(error),
            headers={"WWW-Authenticate": "Bearer"},
        )
    if isinstance(error, NotAuthorizedError):
        action = error.action.replace("_", " ")
        return HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"not authorized to {action}",
        )
    if isinstance(error, NotFoundError):
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{error.resource} not found",
        )
    # ValidationError, ConflictError and any other domain rule violation
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
