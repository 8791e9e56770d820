"""User domain service."""

from datetime import datetime, timezone
from typing import Optional, Sequence
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from forum.domain.error import ConflictError, NotFoundError, ValidationError
from forum.domain.model import User
from forum.domain.repository import UserRepository
from forum.domain.value import UserIcon, UserId, Username

from .base import Service
from .password_service import PasswordService

# bcrypt only looks at the first 72 bytes
MAX_PASSWORD_BYTES = 72

WRONG_CREDENTIALS = "wrong username or password"


def parse_username(raw: str) -> Username:
    """Validate a raw username.

    Raises:
        ValidationError: If the username is malformed
    """
    try:
        return Username(raw)
    except PydanticValidationError as e:
        message = e.errors()[0]["msg"].removeprefix("Value error, ")
        raise ValidationError(message) from e


class UserService(Service):
    """Domain service for user operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordService,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            password_service: Password hashing service
        """
        self.user_repository = user_repository
        self.password_service = password_service

    async def sign_up(self, username: str, password: str) -> User:
        """Register a new user.

        Args:
            username: Requested username
            password: Plain-text password

        Returns:
            The created user

        Raises:
            ValidationError: If a field is missing or malformed
            ConflictError: If the username is taken
        """
        if not username or not password:
            raise ValidationError("missing username or password")
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError("password must be at most 72 bytes")

        name = parse_username(username)

        with logfire.span("user_service.sign_up", username=name.root):
            if await self.user_repository.find_by_username(name):
                logfire.info("Sign-up with taken username", username=name.root)
                raise ConflictError("username taken")

            user = User(
                id=UserId(uuid4()),
                username=name,
                password_hash=self.password_service.hash_password(password),
            )
            saved = await self.user_repository.save(user)
            logfire.info("User signed up", user_id=str(saved.id))
            return saved

    async def check_credentials(self, username: str, password: str) -> User:
        """Look up a user by username and check their password.

        The failure message is the same whether or not the username exists.

        Raises:
            ValidationError: If a field is missing or the credentials are wrong
        """
        if not username or not password:
            raise ValidationError("missing username or password")

        with logfire.span("user_service.check_credentials"):
            try:
                name = Username(username)
            except PydanticValidationError:
                raise ValidationError(WRONG_CREDENTIALS)

            user = await self.user_repository.find_by_username(name)
            if user is None or not self.password_service.verify_password(
                password, user.password_hash
            ):
                logfire.info("Log-in rejected")
                raise ValidationError(WRONG_CREDENTIALS)
            return user

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_ids(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        """Batch lookup, keyed by user ID. Unknown IDs are absent."""
        if not user_ids:
            return {}
        users = await self.user_repository.find_by_ids(list(set(user_ids)))
        return {user.id: user for user in users}

    async def update_profile(
        self,
        user_id: UserId,
        username: Optional[str] = None,
        icon: Optional[UserIcon] = None,
    ) -> User:
        """Change a user's username and/or icon.

        Fields left as None are unchanged.

        Raises:
            NotFoundError: If the user doesn't exist
            ValidationError: If the new username is malformed
            ConflictError: If the new username belongs to someone else
        """
        with logfire.span("user_service.update_profile", user_id=str(user_id)):
            user = await self.get_by_id(user_id)
            update: dict = {"updated_at": datetime.now(timezone.utc)}

            if username is not None:
                name = parse_username(username)
                existing = await self.user_repository.find_by_username(name)
                if existing and existing.id != user_id:
                    raise ConflictError("username taken")
                update["username"] = name

            if icon is not None:
                update["icon"] = icon

            saved = await self.user_repository.save(user.model_copy(update=update))
            logfire.info("Profile updated", user_id=str(user_id))
            return saved
