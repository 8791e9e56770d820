"""Get post use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import PostService
from forum.domain.value import PostId

from ..base import BaseUseCase
from .post_view import PostInfo, PostViewBuilder


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str


class GetPostUseCase(BaseUseCase[GetPostRequest, PostInfo]):
    """Use case for retrieving a post by ID."""

    def __init__(self, post_service: PostService, views: PostViewBuilder) -> None:
        self.post_service = post_service
        self.views = views

    async def execute(self, request: GetPostRequest) -> PostInfo:
        """Execute get post flow.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        post = await self.post_service.get_post(PostId(UUID(request.post_id)))
        return await self.views.build_one(post)
