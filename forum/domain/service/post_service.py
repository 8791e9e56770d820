"""Post domain service."""

from typing import List, Optional
from uuid import uuid4

import logfire

from forum.domain.error import NotFoundError, ValidationError
from forum.domain.model import Post
from forum.domain.repository import CommentRepository, PostRepository, VoteRepository
from forum.domain.value import Action, PostId, UserId, VotableType

from .authorization_service import AuthorizationService
from .base import Service

TITLE_MAX_LENGTH = 300
CONTENT_MAX_LENGTH = 10000


def clean_title(title: Optional[str]) -> str:
    """Trim and validate a post title.

    Raises:
        ValidationError: If the title is missing, blank or too long
    """
    title = (title or "").strip()
    if not title:
        raise ValidationError("title is required")
    if len(title) > TITLE_MAX_LENGTH:
        raise ValidationError(f"title must be at most {TITLE_MAX_LENGTH} characters")
    return title


def clean_content(content: Optional[str]) -> Optional[str]:
    if content is not None and len(content) > CONTENT_MAX_LENGTH:
        raise ValidationError(
            f"content must be at most {CONTENT_MAX_LENGTH} characters"
        )
    return content


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        vote_repository: VoteRepository,
        authorization_service: AuthorizationService,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            comment_repository: Comment repository (for cascading vote cleanup)
            vote_repository: Vote repository
            authorization_service: Ownership policy
        """
        self.post_repository = post_repository
        self.comment_repository = comment_repository
        self.vote_repository = vote_repository
        self.authorization_service = authorization_service

    async def create_post(
        self, author_id: UserId, title: Optional[str], content: Optional[str]
    ) -> Post:
        """Create a post owned by ``author_id``.

        Raises:
            ValidationError: If the title is missing or a field is too long
        """
        post = Post(
            id=PostId(uuid4()),
            title=clean_title(title),
            content=clean_content(content),
            author_id=author_id,
        )
        with logfire.span(
            "post_service.create_post", post_id=str(post.id), author_id=str(author_id)
        ):
            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id))
            return saved

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span("post_service.get_post", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            return post

    async def list_posts(self) -> List[Post]:
        """All posts, newest first."""
        with logfire.span("post_service.list_posts"):
            return await self.post_repository.find_all()

    async def list_posts_by_author(self, author_id: UserId) -> List[Post]:
        """Posts owned by ``author_id``, newest first."""
        with logfire.span("post_service.list_posts_by_author", author_id=str(author_id)):
            return await self.post_repository.find_by_author(author_id)

    async def update_post(
        self,
        post_id: PostId,
        caller: UserId,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> Post:
        """Edit a post's title and/or content. Owner only.

        Fields left as None keep their current value.

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the caller doesn't own the post
            ValidationError: If a new value is invalid
        """
        with logfire.span("post_service.update_post", post_id=str(post_id)):
            post = await self.get_post(post_id)
            self.authorization_service.ensure_authorized(Action.EDIT_POST, caller, post)

            new_title = clean_title(title) if title is not None else post.title
            new_content = clean_content(content) if content is not None else post.content

            updated = await self.post_repository.update_content(
                post_id, new_title, new_content
            )
            if updated is None:
                # Deleted between the read and the write
                raise NotFoundError("Post", str(post_id))
            logfire.info("Post updated", post_id=str(post_id))
            return updated

    async def delete_post(self, post_id: PostId, caller: UserId) -> None:
        """Delete a post with its comments and all their votes. Owner only.

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the caller doesn't own the post
        """
        with logfire.span("post_service.delete_post", post_id=str(post_id)):
            post = await self.get_post(post_id)
            self.authorization_service.ensure_authorized(
                Action.DELETE_POST, caller, post
            )

            comments = await self.comment_repository.find_by_post(post_id)
            if comments:
                await self.vote_repository.delete_by_votables(
                    VotableType.COMMENT, [c.id for c in comments]
                )
            await self.vote_repository.delete_by_votables(VotableType.POST, [post_id])

            if not await self.post_repository.delete(post_id):
                raise NotFoundError("Post", str(post_id))
            logfire.info(
                "Post deleted", post_id=str(post_id), comment_count=len(comments)
            )
