"""Create post use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import PostService
from forum.domain.value import UserId

from ..base import BaseUseCase
from .post_view import PostInfo, PostViewBuilder


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str | None = None
    content: str | None = None
    author_id: str  # User ID from authenticated user


class CreatePostUseCase(BaseUseCase[CreatePostRequest, PostInfo]):
    """Use case for creating a new post."""

    def __init__(self, post_service: PostService, views: PostViewBuilder) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            views: Read model builder
        """
        self.post_service = post_service
        self.views = views

    async def execute(self, request: CreatePostRequest) -> PostInfo:
        """Execute create post flow.

        Raises:
            ValidationError: If the title is missing or a field is too long
        """
        post = await self.post_service.create_post(
            UserId(UUID(request.author_id)), request.title, request.content
        )
        return await self.views.build_one(post)
