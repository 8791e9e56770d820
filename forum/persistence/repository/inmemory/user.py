"""In-memory user repository for testing."""

from typing import Optional, Sequence

from forum.domain.error import ConflictError
from forum.domain.model.user import User
from forum.domain.repository.user import UserRepository
from forum.domain.value import UserId, Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users by ID."""
        return [self._users[uid] for uid in set(user_ids) if uid in self._users]

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save a user, enforcing username uniqueness like the database does."""
        for other in self._users.values():
            if other.id != user.id and other.username == user.username:
                raise ConflictError("username taken")
        self._users[user.id] = user
        return user
