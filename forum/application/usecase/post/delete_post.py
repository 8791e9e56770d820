"""Delete post use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import PostService
from forum.domain.value import PostId, UserId

from ..base import BaseUseCase


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str
    user_id: str  # User ID from authenticated user


class DeletePostResponse(BaseModel):
    """Delete post response."""

    message: str


class DeletePostUseCase(BaseUseCase[DeletePostRequest, DeletePostResponse]):
    """Use case for deleting a post with its comments and votes (owner only)."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the caller doesn't own the post
        """
        await self.post_service.delete_post(
            PostId(UUID(request.post_id)), UserId(UUID(request.user_id))
        )
        return DeletePostResponse(message="post deleted")
