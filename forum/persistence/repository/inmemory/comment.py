"""In-memory comment repository for testing."""

from datetime import datetime, timezone
from typing import Optional, Sequence

from forum.domain.model.comment import Comment
from forum.domain.repository.comment import CommentRepository
from forum.domain.value import CommentId, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Dict insertion order doubles as comment insertion order.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find all comments for a post in insertion order."""
        return [c for c in self._comments.values() if c.post_id == post_id]

    async def find_by_posts(
        self, post_ids: Sequence[PostId]
    ) -> dict[PostId, list[Comment]]:
        """Find comments for several posts."""
        by_post: dict[PostId, list[Comment]] = {post_id: [] for post_id in post_ids}
        for comment in self._comments.values():
            if comment.post_id in by_post:
                by_post[comment.post_id].append(comment)
        return by_post

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._comments[comment.id] = comment
        return comment

    async def update_content(
        self, post_id: PostId, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace one comment's content in place."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.post_id != post_id:
            return None
        updated = comment.model_copy(
            update={"content": content, "updated_at": datetime.now(timezone.utc)}
        )
        self._comments[comment_id] = updated
        return updated

    async def delete(self, post_id: PostId, comment_id: CommentId) -> bool:
        """Delete one comment."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.post_id != post_id:
            return False
        del self._comments[comment_id]
        return True

    def delete_by_post(self, post_id: PostId) -> None:
        """Drop all comments of a post (stands in for ON DELETE CASCADE)."""
        self._comments = {
            cid: c for cid, c in self._comments.items() if c.post_id != post_id
        }
