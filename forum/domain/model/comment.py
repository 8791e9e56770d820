"""Comment entity.

Comments belong to exactly one post and are listed in insertion order.
"""

from datetime import datetime, timezone

from pydantic import Field, field_validator

from forum.domain.model.common import DomainModel
from forum.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment entity.

    Has no lifecycle of its own: deleting the post deletes its comments.
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    content: str = Field(min_length=1, max_length=10000)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("content", mode="before")
    @classmethod
    def strip_content(cls, v: object) -> object:
        """Content is trimmed before the non-empty check."""
        return v.strip() if isinstance(v, str) else v
