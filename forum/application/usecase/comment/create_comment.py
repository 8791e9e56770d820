"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import CommentService
from forum.domain.value import PostId, UserId

from ..base import BaseUseCase
from ..post.post_view import CommentInfo, PostViewBuilder


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str
    author_id: str  # User ID from authenticated user
    content: str | None = None


class CreateCommentUseCase(BaseUseCase[CreateCommentRequest, CommentInfo]):
    """Use case for adding a comment to a post."""

    def __init__(self, comment_service: CommentService, views: PostViewBuilder) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            views: Read model builder
        """
        self.comment_service = comment_service
        self.views = views

    async def execute(self, request: CreateCommentRequest) -> CommentInfo:
        """Execute create comment flow.

        Raises:
            ValidationError: If the content is missing or too long
            NotFoundError: If the post doesn't exist
        """
        comment = await self.comment_service.create_comment(
            PostId(UUID(request.post_id)),
            UserId(UUID(request.author_id)),
            request.content,
        )
        return await self.views.build_comment(comment)
