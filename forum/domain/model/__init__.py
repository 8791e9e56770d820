"""Domain models."""

from forum.domain.model.comment import Comment
from forum.domain.model.common import DomainModel
from forum.domain.model.post import Post
from forum.domain.model.user import User
from forum.domain.model.vote_ledger import VoteLedger, resolve_toggle

__all__ = [
    "Comment",
    "DomainModel",
    "Post",
    "User",
    "VoteLedger",
    "resolve_toggle",
]
