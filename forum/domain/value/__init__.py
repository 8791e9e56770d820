"""Domain value objects for the forum."""

from forum.domain.value.identifiers import (
    CommentId,
    PostId,
    UserId,
    VoteId,
)
from forum.domain.value.types import (
    Action,
    UserIcon,
    Username,
    VotableType,
    VoteType,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "VoteId",
    # Types
    "Action",
    "UserIcon",
    "Username",
    "VotableType",
    "VoteType",
]
