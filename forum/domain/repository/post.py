"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from forum.domain.model.post import Post
from forum.domain.value import PostId, UserId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Post]:
        """Find every post, newest first."""
        pass

    @abstractmethod
    async def find_by_author(self, author_id: UserId) -> List[Post]:
        """Find posts by a specific author, newest first.

        Args:
            author_id: The author's user ID

        Returns:
            List of posts by the author
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a new post.

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def update_content(
        self, post_id: PostId, title: str, content: Optional[str]
    ) -> Optional[Post]:
        """Replace the title and content of a post.

        Only the targeted row is written; votes and comments on the
        post are left alone.

        Args:
            post_id: ID of the post to update
            title: New title
            content: New content (None to clear)

        Returns:
            Updated Post entity, or None if the post doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post and its comments.

        Args:
            post_id: The post ID to delete

        Returns:
            True if a post was deleted, False if it didn't exist
        """
        pass
