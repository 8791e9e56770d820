"""Post routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from forum.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    PostInfo,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from forum.domain.error import DomainError
from forum.domain.value import UserId
from forum.interface.api.security import current_caller, parse_id
from forum.interface.error import to_http_exception

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)

# Caller-scoped listing lives outside the /posts prefix
my_posts_router = APIRouter(tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post.

    Presence and length are checked by the post service so that a missing
    title yields a plain ``{"message"}`` 400.
    """

    title: str | None = None
    content: str | None = None


class UpdatePostAPIRequest(BaseModel):
    """API request for editing a post. Omitted fields are unchanged."""

    title: str | None = None
    content: str | None = None


@router.get("", response_model=list[PostInfo])
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
) -> list[PostInfo]:
    """List all posts, newest first, with vote counts and comments."""
    result = await list_posts_use_case.execute(ListPostsRequest())
    return result.posts


@my_posts_router.get("/my-posts", response_model=list[PostInfo])
async def list_my_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    user_id: UserId = Depends(current_caller),
) -> list[PostInfo]:
    """List the caller's own posts, newest first.

    Raises:
        HTTPException: 401 if not authenticated
    """
    result = await list_posts_use_case.execute(ListPostsRequest(author_id=str(user_id)))
    return result.posts


@router.get("/{post_id}", response_model=PostInfo)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> PostInfo:
    """Get one post with vote counts and comments.

    Raises:
        HTTPException: 404 if the post doesn't exist
    """
    post_uuid = parse_id(post_id, "Post")
    try:
        return await get_post_use_case.execute(GetPostRequest(post_id=str(post_uuid)))
    except DomainError as e:
        raise to_http_exception(e) from e


@router.post("", response_model=PostInfo, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    user_id: UserId = Depends(current_caller),
) -> PostInfo:
    """Create a new post.

    Requires authentication.

    Raises:
        HTTPException: 401 if not authenticated, 400 if validation fails
    """
    try:
        return await create_post_use_case.execute(
            CreatePostRequest(
                title=request.title,
                content=request.content,
                author_id=str(user_id),
            )
        )
    except DomainError as e:
        logfire.warn("Post creation domain error", error=str(e))
        raise to_http_exception(e) from e


@router.put("/{post_id}", response_model=PostInfo)
async def update_post(
    post_id: str,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    user_id: UserId = Depends(current_caller),
) -> PostInfo:
    """Edit a post's title and/or content.

    Only the post author can edit.

    Raises:
        HTTPException: 401 if not authenticated, 403 if not the author,
            404 if the post doesn't exist, 400 if validation fails
    """
    post_uuid = parse_id(post_id, "Post")
    try:
        return await update_post_use_case.execute(
            UpdatePostRequest(
                post_id=str(post_uuid),
                user_id=str(user_id),
                title=request.title,
                content=request.content,
            )
        )
    except DomainError as e:
        logfire.warn("Post update rejected", post_id=str(post_uuid), error=str(e))
        raise to_http_exception(e) from e


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    user_id: UserId = Depends(current_caller),
) -> DeletePostResponse:
    """Delete a post with all of its comments and votes.

    Only the post author can delete.

    Raises:
        HTTPException: 401 if not authenticated, 403 if not the author,
            404 if the post doesn't exist
    """
    post_uuid = parse_id(post_id, "Post")
    try:
        return await delete_post_use_case.execute(
            DeletePostRequest(post_id=str(post_uuid), user_id=str(user_id))
        )
    except DomainError as e:
        logfire.warn("Post deletion rejected", post_id=str(post_uuid), error=str(e))
        raise to_http_exception(e) from e
