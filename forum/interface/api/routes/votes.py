"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field

from forum.application.usecase.vote import (
    ToggleVoteRequest,
    ToggleVoteResponse,
    ToggleVoteUseCase,
)
from forum.domain.error import DomainError
from forum.domain.value import UserId, VotableType, VoteType
from forum.interface.api.security import current_caller, parse_id
from forum.interface.error import to_http_exception

router = APIRouter(prefix="/posts", tags=["votes"], route_class=DishkaRoute)


class VoteAPIRequest(BaseModel):
    """API request body: ``{"voteType": "upvote" | "downvote"}``."""

    model_config = ConfigDict(populate_by_name=True)

    vote_type: str | None = Field(default=None, alias="voteType")

    def direction(self) -> VoteType:
        """Parse the wire value.

        Raises:
            HTTPException: 400 if the value is missing or unknown
        """
        try:
            return VoteType.from_api(self.vote_type or "")
        except ValueError as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="invalid vote type"
            ) from e


@router.post("/{post_id}/vote", response_model=ToggleVoteResponse)
async def vote_on_post(
    post_id: str,
    request: VoteAPIRequest,
    toggle_vote_use_case: FromDishka[ToggleVoteUseCase],
    user_id: UserId = Depends(current_caller),
) -> ToggleVoteResponse:
    """Toggle the caller's vote on a post.

    Voting the same way twice removes the vote; voting the other way
    switches it.

    Raises:
        HTTPException: 401 if not authenticated, 400 for an unknown vote
            type, 404 if the post doesn't exist
    """
    post_uuid = parse_id(post_id, "Post")
    direction = request.direction()
    try:
        return await toggle_vote_use_case.execute(
            ToggleVoteRequest(
                votable_type=VotableType.POST,
                post_id=str(post_uuid),
                user_id=str(user_id),
                vote_type=direction,
            )
        )
    except DomainError as e:
        raise to_http_exception(e) from e


@router.post("/{post_id}/comments/{comment_id}/vote", response_model=ToggleVoteResponse)
async def vote_on_comment(
    post_id: str,
    comment_id: str,
    request: VoteAPIRequest,
    toggle_vote_use_case: FromDishka[ToggleVoteUseCase],
    user_id: UserId = Depends(current_caller),
) -> ToggleVoteResponse:
    """Toggle the caller's vote on a comment. Same rules as for posts.

    Raises:
        HTTPException: 401 if not authenticated, 400 for an unknown vote
            type, 404 if the post or comment doesn't exist
    """
    post_uuid = parse_id(post_id, "Post")
    comment_uuid = parse_id(comment_id, "Comment")
    direction = request.direction()
    try:
        return await toggle_vote_use_case.execute(
            ToggleVoteRequest(
                votable_type=VotableType.COMMENT,
                post_id=str(post_uuid),
                comment_id=str(comment_uuid),
                user_id=str(user_id),
                vote_type=direction,
            )
        )
    except DomainError as e:
        raise to_http_exception(e) from e
