"""Update post use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import PostService
from forum.domain.value import PostId, UserId

from ..base import BaseUseCase
from .post_view import PostInfo, PostViewBuilder


class UpdatePostRequest(BaseModel):
    """Update post request. Omitted fields are left unchanged."""

    post_id: str
    user_id: str  # User ID from authenticated user
    title: str | None = None
    content: str | None = None


class UpdatePostUseCase(BaseUseCase[UpdatePostRequest, PostInfo]):
    """Use case for editing a post (owner only)."""

    def __init__(self, post_service: PostService, views: PostViewBuilder) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
            views: Read model builder
        """
        self.post_service = post_service
        self.views = views

    async def execute(self, request: UpdatePostRequest) -> PostInfo:
        """Execute update post flow.

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the caller doesn't own the post
            ValidationError: If a new value is invalid
        """
        post = await self.post_service.update_post(
            PostId(UUID(request.post_id)),
            UserId(UUID(request.user_id)),
            title=request.title,
            content=request.content,
        )
        return await self.views.build_one(post)
