"""Vote domain service."""

from typing import Dict, Sequence
from uuid import UUID

import logfire

from forum.domain.model import VoteLedger
from forum.domain.repository import VoteRepository
from forum.domain.value import CommentId, PostId, UserId, VotableType, VoteType

from .base import Service
from .comment_service import CommentService
from .post_service import PostService


class VoteService(Service):
    """Domain service for vote operations.

    Any authenticated user may vote on any post or comment, including
    their own.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        post_service: PostService,
        comment_service: CommentService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            post_service: Post domain service
            comment_service: Comment domain service
        """
        self.vote_repository = vote_repository
        self.post_service = post_service
        self.comment_service = comment_service

    async def toggle_post_vote(
        self, post_id: PostId, user_id: UserId, direction: VoteType
    ) -> VoteLedger:
        """Toggle ``user_id``'s vote on a post.

        Args:
            post_id: Post ID
            user_id: Voter
            direction: Up or down

        Returns:
            The post's ledger after the toggle

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span(
            "vote_service.toggle_post_vote",
            post_id=str(post_id),
            user_id=str(user_id),
            direction=direction.value,
        ):
            await self.post_service.get_post(post_id)
            ledger = await self.vote_repository.toggle(
                VotableType.POST, post_id, user_id, direction
            )
            logfire.info(
                "Post vote toggled",
                post_id=str(post_id),
                vote=_vote_label(ledger, user_id),
                score=ledger.score,
            )
            return ledger

    async def toggle_comment_vote(
        self,
        post_id: PostId,
        comment_id: CommentId,
        user_id: UserId,
        direction: VoteType,
    ) -> VoteLedger:
        """Toggle ``user_id``'s vote on a comment.

        Raises:
            NotFoundError: If the post or the comment doesn't exist
        """
        with logfire.span(
            "vote_service.toggle_comment_vote",
            comment_id=str(comment_id),
            user_id=str(user_id),
            direction=direction.value,
        ):
            await self.comment_service.get_comment(post_id, comment_id)
            ledger = await self.vote_repository.toggle(
                VotableType.COMMENT, comment_id, user_id, direction
            )
            logfire.info(
                "Comment vote toggled",
                comment_id=str(comment_id),
                vote=_vote_label(ledger, user_id),
                score=ledger.score,
            )
            return ledger

    async def get_ledgers(
        self, votable_type: VotableType, votable_ids: Sequence[UUID]
    ) -> Dict[UUID, VoteLedger]:
        """Ledgers for several items, with an entry for every ID."""
        if not votable_ids:
            return {}
        return await self.vote_repository.find_ledgers(votable_type, votable_ids)


def _vote_label(ledger: VoteLedger, user_id: UserId) -> str:
    vote = ledger.vote_of(user_id)
    return vote.value if vote else "none"
