"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from forum.domain.model.comment import Comment
from forum.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post in insertion order.

        Args:
            post_id: The post ID

        Returns:
            List of comments, oldest first
        """
        pass

    @abstractmethod
    async def find_by_posts(
        self, post_ids: Sequence[PostId]
    ) -> Dict[PostId, List[Comment]]:
        """Find comments for several posts in one query.

        Args:
            post_ids: Post IDs to look up

        Returns:
            Mapping of post ID to its comments in insertion order.
            Posts without comments map to an empty list.
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a new comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def update_content(
        self, post_id: PostId, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace the content of one comment.

        Args:
            post_id: The post the comment must belong to
            comment_id: ID of the comment to update
            content: New content

        Returns:
            Updated Comment, or None if no such comment exists on the post
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId, comment_id: CommentId) -> bool:
        """Delete a single comment.

        Args:
            post_id: The post the comment must belong to
            comment_id: The comment ID to delete

        Returns:
            True if a comment was deleted, False otherwise
        """
        pass
