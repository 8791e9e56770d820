"""Public view of a user, shared by the auth use cases."""

from datetime import datetime

from pydantic import BaseModel

from forum.domain.model import User
from forum.domain.value import UserIcon


class UserInfo(BaseModel):
    """User information for responses. Never includes the password hash."""

    id: str
    username: str
    icon: UserIcon | None
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls(
            id=str(user.id),
            username=user.username.root,
            icon=user.icon,
            created_at=user.created_at,
        )
