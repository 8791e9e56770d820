"""Post aggregate root."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field, field_validator

from forum.domain.model.common import DomainModel
from forum.domain.value import PostId, UserId


class Post(DomainModel):
    """Post aggregate root.

    Owns its comments (stored separately, deleted with the post) and
    a vote ledger keyed by the post id.
    """

    id: PostId
    title: str = Field(min_length=1, max_length=300)
    content: Optional[str] = Field(default=None, max_length=10000)
    author_id: UserId
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v: object) -> object:
        """Titles are trimmed before the non-empty check."""
        return v.strip() if isinstance(v, str) else v
