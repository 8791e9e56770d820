"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import CommentService
from forum.domain.value import CommentId, PostId, UserId

from ..base import BaseUseCase
from ..post.post_view import CommentInfo, PostViewBuilder


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    post_id: str
    comment_id: str
    user_id: str  # User ID from authenticated user
    content: str | None = None


class UpdateCommentUseCase(BaseUseCase[UpdateCommentRequest, CommentInfo]):
    """Use case for editing a comment (comment author only)."""

    def __init__(self, comment_service: CommentService, views: PostViewBuilder) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
            views: Read model builder
        """
        self.comment_service = comment_service
        self.views = views

    async def execute(self, request: UpdateCommentRequest) -> CommentInfo:
        """Execute update comment flow.

        Raises:
            ValidationError: If the content is missing or too long
            NotFoundError: If the post or comment doesn't exist
            NotAuthorizedError: If the caller didn't write the comment
        """
        comment = await self.comment_service.update_comment(
            PostId(UUID(request.post_id)),
            CommentId(UUID(request.comment_id)),
            UserId(UUID(request.user_id)),
            request.content,
        )
        return await self.views.build_comment(comment)
