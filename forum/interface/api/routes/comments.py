"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from forum.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from forum.application.usecase.post import CommentInfo
from forum.domain.error import DomainError
from forum.domain.value import UserId
from forum.interface.api.security import current_caller, parse_id
from forum.interface.error import to_http_exception

router = APIRouter(
    prefix="/posts/{post_id}/comments", tags=["comments"], route_class=DishkaRoute
)


class CommentAPIRequest(BaseModel):
    """API request for creating or editing a comment."""

    content: str | None = None


@router.post("", response_model=CommentInfo, status_code=status.HTTP_201_CREATED)
async def create_comment(
    post_id: str,
    request: CommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    user_id: UserId = Depends(current_caller),
) -> CommentInfo:
    """Add a comment to a post.

    Raises:
        HTTPException: 401 if not authenticated, 404 if the post doesn't
            exist, 400 if the content is missing
    """
    post_uuid = parse_id(post_id, "Post")
    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                post_id=str(post_uuid),
                author_id=str(user_id),
                content=request.content,
            )
        )
    except DomainError as e:
        logfire.warn("Comment creation rejected", post_id=str(post_uuid), error=str(e))
        raise to_http_exception(e) from e


@router.put("/{comment_id}", response_model=CommentInfo)
async def update_comment(
    post_id: str,
    comment_id: str,
    request: CommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    user_id: UserId = Depends(current_caller),
) -> CommentInfo:
    """Edit a comment. Only the comment author can edit.

    Raises:
        HTTPException: 401 if not authenticated, 403 if not the author,
            404 if the post or comment doesn't exist
    """
    post_uuid = parse_id(post_id, "Post")
    comment_uuid = parse_id(comment_id, "Comment")
    try:
        return await update_comment_use_case.execute(
            UpdateCommentRequest(
                post_id=str(post_uuid),
                comment_id=str(comment_uuid),
                user_id=str(user_id),
                content=request.content,
            )
        )
    except DomainError as e:
        logfire.warn(
            "Comment update rejected", comment_id=str(comment_uuid), error=str(e)
        )
        raise to_http_exception(e) from e


@router.delete("/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    post_id: str,
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    user_id: UserId = Depends(current_caller),
) -> DeleteCommentResponse:
    """Delete a comment.

    Allowed for the comment author and for the author of the post.

    Raises:
        HTTPException: 401 if not authenticated, 403 for anyone else,
            404 if the post or comment doesn't exist
    """
    post_uuid = parse_id(post_id, "Post")
    comment_uuid = parse_id(comment_id, "Comment")
    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(
                post_id=str(post_uuid),
                comment_id=str(comment_uuid),
                user_id=str(user_id),
            )
        )
    except DomainError as e:
        logfire.warn(
            "Comment deletion rejected", comment_id=str(comment_uuid), error=str(e)
        )
        raise to_http_exception(e) from e
