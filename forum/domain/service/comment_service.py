"""Comment domain service."""

from typing import Dict, List, Optional, Sequence
from uuid import uuid4

import logfire

from forum.domain.error import NotFoundError, ValidationError
from forum.domain.model import Comment, Post
from forum.domain.repository import CommentRepository, VoteRepository
from forum.domain.value import Action, CommentId, PostId, UserId, VotableType

from .authorization_service import AuthorizationService
from .base import Service
from .post_service import CONTENT_MAX_LENGTH, PostService


def clean_comment_content(content: Optional[str]) -> str:
    """Trim and validate comment content.

    Raises:
        ValidationError: If the content is missing, blank or too long
    """
    content = (content or "").strip()
    if not content:
        raise ValidationError("content is required")
    if len(content) > CONTENT_MAX_LENGTH:
        raise ValidationError(
            f"content must be at most {CONTENT_MAX_LENGTH} characters"
        )
    return content


class CommentService(Service):
    """Domain service for comment operations.

    Comments are always addressed through their post: a comment ID
    that belongs to a different post is treated as not found.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        vote_repository: VoteRepository,
        post_service: PostService,
        authorization_service: AuthorizationService,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            vote_repository: Vote repository
            post_service: Post domain service
            authorization_service: Ownership policy
        """
        self.comment_repository = comment_repository
        self.vote_repository = vote_repository
        self.post_service = post_service
        self.authorization_service = authorization_service

    async def create_comment(
        self, post_id: PostId, author_id: UserId, content: Optional[str]
    ) -> Comment:
        """Append a comment to a post.

        Raises:
            ValidationError: If the content is missing or too long
            NotFoundError: If the post doesn't exist
        """
        content = clean_comment_content(content)
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(author_id),
        ):
            await self.post_service.get_post(post_id)
            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=author_id,
                content=content,
            )
            saved = await self.comment_repository.save(comment)
            logfire.info("Comment created", comment_id=str(saved.id))
            return saved

    async def get_comment(
        self, post_id: PostId, comment_id: CommentId
    ) -> tuple[Post, Comment]:
        """Resolve a comment together with its parent post.

        Raises:
            NotFoundError: If the post or the comment (on that post) doesn't exist
        """
        post = await self.post_service.get_post(post_id)
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None or comment.post_id != post_id:
            logfire.warn(
                "Comment not found", post_id=str(post_id), comment_id=str(comment_id)
            )
            raise NotFoundError("Comment", str(comment_id))
        return post, comment

    async def list_comments_for_posts(
        self, post_ids: Sequence[PostId]
    ) -> Dict[PostId, List[Comment]]:
        """Comments on several posts, each list in insertion order."""
        if not post_ids:
            return {}
        return await self.comment_repository.find_by_posts(post_ids)

    async def update_comment(
        self,
        post_id: PostId,
        comment_id: CommentId,
        caller: UserId,
        content: Optional[str],
    ) -> Comment:
        """Edit a comment's content. Comment author only.

        Raises:
            ValidationError: If the content is missing or too long
            NotFoundError: If the post or comment doesn't exist
            NotAuthorizedError: If the caller didn't write the comment
        """
        content = clean_comment_content(content)
        with logfire.span(
            "comment_service.update_comment",
            post_id=str(post_id),
            comment_id=str(comment_id),
        ):
            post, comment = await self.get_comment(post_id, comment_id)
            self.authorization_service.ensure_authorized(
                Action.EDIT_COMMENT, caller, post, comment
            )
            updated = await self.comment_repository.update_content(
                post_id, comment_id, content
            )
            if updated is None:
                raise NotFoundError("Comment", str(comment_id))
            logfire.info("Comment updated", comment_id=str(comment_id))
            return updated

    async def delete_comment(
        self, post_id: PostId, comment_id: CommentId, caller: UserId
    ) -> None:
        """Delete a comment. Allowed for its author or the post's author.

        Raises:
            NotFoundError: If the post or comment doesn't exist
            NotAuthorizedError: If the caller owns neither
        """
        with logfire.span(
            "comment_service.delete_comment",
            post_id=str(post_id),
            comment_id=str(comment_id),
        ):
            post, comment = await self.get_comment(post_id, comment_id)
            self.authorization_service.ensure_authorized(
                Action.DELETE_COMMENT, caller, post, comment
            )
            await self.vote_repository.delete_by_votables(
                VotableType.COMMENT, [comment_id]
            )
            if not await self.comment_repository.delete(post_id, comment_id):
                raise NotFoundError("Comment", str(comment_id))
            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                by_post_author=caller != comment.author_id,
            )
