"""List posts use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import PostService
from forum.domain.value import UserId

from ..base import BaseUseCase
from .post_view import PostInfo, PostViewBuilder


class ListPostsRequest(BaseModel):
    """List posts request.

    With ``author_id`` set, only that user's posts are listed (used for
    the caller's own posts).
    """

    author_id: str | None = None


class ListPostsResponse(BaseModel):
    """List posts response, newest first."""

    posts: list[PostInfo]


class ListPostsUseCase(BaseUseCase[ListPostsRequest, ListPostsResponse]):
    """Use case for listing all posts, or one author's posts."""

    def __init__(self, post_service: PostService, views: PostViewBuilder) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            views: Read model builder
        """
        self.post_service = post_service
        self.views = views

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        if request.author_id:
            posts = await self.post_service.list_posts_by_author(
                UserId(UUID(request.author_id))
            )
        else:
            posts = await self.post_service.list_posts()
        return ListPostsResponse(posts=await self.views.build(posts))
