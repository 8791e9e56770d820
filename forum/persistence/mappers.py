"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Iterable
from uuid import UUID

from forum.domain.model import Comment, Post, User, VoteLedger
from forum.domain.value import (
    CommentId,
    PostId,
    UserIcon,
    UserId,
    Username,
    VotableType,
    VoteType,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        password_hash=row["password_hash"],
        icon=UserIcon(row["icon"]) if row.get("icon") else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": user.id,
        "username": user.username.root,
        "password_hash": user.password_hash,
        "icon": user.icon.value if user.icon else None,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    The stored ``score`` column is ignored: scores are always derived
    from the vote ledger.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        title=row["title"],
        content=row.get("content"),
        author_id=UserId(_uuid(row["author_id"])),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return post.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return comment.model_dump()


def rows_to_ledger(
    votable_type: VotableType, votable_id: UUID, rows: Iterable[Dict[str, Any]]
) -> VoteLedger:
    """Fold vote rows (``user_id``, ``vote_type``) into a ledger.

    Args:
        votable_type: Type of the voted item
        votable_id: ID of the voted item
        rows: Vote rows for that item

    Returns:
        VoteLedger domain model
    """
    upvoters = set()
    downvoters = set()
    for row in rows:
        user_id = UserId(_uuid(row["user_id"]))
        if VoteType(row["vote_type"]) is VoteType.UP:
            upvoters.add(user_id)
        else:
            downvoters.add(user_id)
    return VoteLedger(
        votable_type=votable_type,
        votable_id=votable_id,
        upvoters=frozenset(upvoters),
        downvoters=frozenset(downvoters),
    )
