"""User aggregate root.

Users sign up with a username and password and authenticate with
bearer tokens issued at log-in.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import UserIcon, UserId, Username


class User(DomainModel):
    """User aggregate root.

    The username is unique but mutable through a profile update;
    ownership of posts and comments is always recorded by ``id``.
    """

    id: UserId
    username: Username
    password_hash: str = Field(repr=False)
    icon: Optional[UserIcon] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
