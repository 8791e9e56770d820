"""Domain value objects for the forum.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import field_validator

from forum.domain.value.common import RootValueObject

MAX_USERNAME_LENGTH = 30


class VoteType(str, Enum):
    """Direction of a vote."""

    UP = "up"
    DOWN = "down"

    @property
    def api_value(self) -> str:
        """Wire representation ("upvote" / "downvote")."""
        return f"{self.value}vote"

    @classmethod
    def from_api(cls, value: str) -> "VoteType":
        """Parse the wire representation.

        Raises:
            ValueError: If value is not "upvote" or "downvote"
        """
        for vote_type in cls:
            if vote_type.api_value == value:
                return vote_type
        raise ValueError("invalid vote type")


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    POST = "post"
    COMMENT = "comment"


class Action(str, Enum):
    """Mutating actions subject to ownership checks."""

    EDIT_POST = "edit_post"
    DELETE_POST = "delete_post"
    EDIT_COMMENT = "edit_comment"
    DELETE_COMMENT = "delete_comment"


class UserIcon(str, Enum):
    """Selectable profile icons."""

    CAT = "cat"
    DOG = "dog"
    FOX = "fox"
    OWL = "owl"
    PANDA = "panda"


class Username(RootValueObject[str]):
    """Unique, mutable display name.

    Any text of 1-30 characters after trimming surrounding whitespace,
    matching the width of the users.username column. Examples: 'alice',
    'John Doe', 'émile'
    """

    @field_validator("root", mode="before")
    @classmethod
    def strip_whitespace(cls, v: object) -> object:
        """Trim surrounding whitespace before validation."""
        return v.strip() if isinstance(v, str) else v

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username length."""
        if not v:
            raise ValueError("username is required")
        if len(v) > MAX_USERNAME_LENGTH:
            raise ValueError(
                f"username must be at most {MAX_USERNAME_LENGTH} characters"
            )
        return v
