"""Toggle vote use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import VoteService
from forum.domain.value import CommentId, PostId, UserId, VotableType, VoteType

from ..base import BaseUseCase


class ToggleVoteRequest(BaseModel):
    """Toggle vote request.

    ``comment_id`` is required when voting on a comment.
    """

    votable_type: VotableType
    post_id: str
    comment_id: str | None = None
    user_id: str  # User ID from authenticated user
    vote_type: VoteType


class ToggleVoteResponse(BaseModel):
    """Vote counts after the toggle."""

    votable_type: VotableType
    votable_id: str
    upvotes: int
    downvotes: int
    score: int
    user_vote: str | None  # "upvote", "downvote" or None after an un-vote


class ToggleVoteUseCase(BaseUseCase[ToggleVoteRequest, ToggleVoteResponse]):
    """Use case for up/down voting a post or comment.

    Voting the same direction twice cancels the vote; voting the other
    direction switches it.
    """

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize toggle vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: ToggleVoteRequest) -> ToggleVoteResponse:
        """Execute toggle vote flow.

        Raises:
            NotFoundError: If the post or comment doesn't exist
            ValueError: If a comment vote has no comment_id
        """
        user_id = UserId(UUID(request.user_id))
        post_id = PostId(UUID(request.post_id))

        if request.votable_type == VotableType.POST:
            ledger = await self.vote_service.toggle_post_vote(
                post_id, user_id, request.vote_type
            )
        else:  # VotableType.COMMENT
            if request.comment_id is None:
                raise ValueError("comment_id is required for comment votes")
            ledger = await self.vote_service.toggle_comment_vote(
                post_id,
                CommentId(UUID(request.comment_id)),
                user_id,
                request.vote_type,
            )

        vote = ledger.vote_of(user_id)
        return ToggleVoteResponse(
            votable_type=ledger.votable_type,
            votable_id=str(ledger.votable_id),
            upvotes=ledger.upvote_count,
            downvotes=ledger.downvote_count,
            score=ledger.score,
            user_vote=vote.api_value if vote else None,
        )
