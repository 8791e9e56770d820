"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """A required field is missing or malformed."""

    pass


class ConflictError(DomainError):
    """A uniqueness rule was violated (e.g. username already taken)."""

    pass


class UnauthenticatedError(DomainError):
    """No credential was supplied, or it could not be accepted."""

    def __init__(self, message: str = "No token provided"):
        super().__init__(message)


class InvalidCredentialError(UnauthenticatedError):
    """Credential is malformed, has a bad signature, or is expired."""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, action: str, resource_id: str, user_id: str):
        self.action = action
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(f"User {user_id} is not authorized to {action} {resource_id}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
