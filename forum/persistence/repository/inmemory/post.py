"""In-memory post repository for testing."""

from datetime import datetime, timezone
from typing import Optional

from forum.domain.model.post import Post
from forum.domain.repository.post import PostRepository
from forum.domain.value import PostId, UserId

from .comment import InMemoryCommentRepository


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, comment_repository: InMemoryCommentRepository) -> None:
        self._posts: dict[PostId, Post] = {}
        self._comment_repository = comment_repository

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_all(self) -> list[Post]:
        """Find all posts, newest first."""
        return self._newest_first(self._posts.values())

    async def find_by_author(self, author_id: UserId) -> list[Post]:
        """Find posts by author, newest first."""
        return self._newest_first(
            p for p in self._posts.values() if p.author_id == author_id
        )

    async def save(self, post: Post) -> Post:
        """Save a post."""
        self._posts[post.id] = post
        return post

    async def update_content(
        self, post_id: PostId, title: str, content: Optional[str]
    ) -> Optional[Post]:
        """Replace title and content of one post."""
        post = self._posts.get(post_id)
        if post is None:
            return None
        updated = post.model_copy(
            update={
                "title": title,
                "content": content,
                "updated_at": datetime.now(timezone.utc),
            }
        )
        self._posts[post_id] = updated
        return updated

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post and its comments."""
        if self._posts.pop(post_id, None) is None:
            return False
        self._comment_repository.delete_by_post(post_id)
        return True

    @staticmethod
    def _newest_first(posts) -> list[Post]:
        # Equal timestamps: later inserts come first
        ordered = list(posts)
        ordered.reverse()
        return sorted(ordered, key=lambda p: p.created_at, reverse=True)
