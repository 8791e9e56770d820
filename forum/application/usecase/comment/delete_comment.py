"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import CommentService
from forum.domain.value import CommentId, PostId, UserId

from ..base import BaseUseCase


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    post_id: str
    comment_id: str
    user_id: str  # User ID from authenticated user


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    message: str


class DeleteCommentUseCase(BaseUseCase[DeleteCommentRequest, DeleteCommentResponse]):
    """Use case for deleting a comment.

    Allowed for the comment's author and for the author of the post
    it belongs to.
    """

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the post or comment doesn't exist
            NotAuthorizedError: If the caller owns neither
        """
        await self.comment_service.delete_comment(
            PostId(UUID(request.post_id)),
            CommentId(UUID(request.comment_id)),
            UserId(UUID(request.user_id)),
        )
        return DeleteCommentResponse(message="comment deleted")
