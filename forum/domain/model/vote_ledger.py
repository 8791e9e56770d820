"""Vote ledger for a single votable (post or comment).

A ledger holds two disjoint sets of voters. The score is never
stored on the ledger; it is derived from the set sizes on read.
"""

from typing import Optional
from uuid import UUID

from pydantic import Field, model_validator

from forum.domain.model.common import DomainModel
from forum.domain.value import UserId, VotableType, VoteType


def resolve_toggle(current: Optional[VoteType], direction: VoteType) -> Optional[VoteType]:
    """Resolve the state of one voter's vote after a toggle.

    Voting the same direction again removes the vote; any other
    input sets the vote to ``direction``.

    Args:
        current: The voter's existing vote, if any
        direction: Requested direction

    Returns:
        The new vote, or None if the vote was removed
    """
    if current is direction:
        return None
    return direction


class VoteLedger(DomainModel):
    """Up/down voter sets for one votable.

    Invariant: no voter appears in both sets.
    """

    votable_type: VotableType
    votable_id: UUID
    upvoters: frozenset[UserId] = Field(default_factory=frozenset)
    downvoters: frozenset[UserId] = Field(default_factory=frozenset)

    @model_validator(mode="after")
    def check_disjoint(self) -> "VoteLedger":
        if self.upvoters & self.downvoters:
            raise ValueError("a voter cannot be in both upvoters and downvoters")
        return self

    @property
    def upvote_count(self) -> int:
        return len(self.upvoters)

    @property
    def downvote_count(self) -> int:
        return len(self.downvoters)

    @property
    def score(self) -> int:
        """Upvotes minus downvotes."""
        return self.upvote_count - self.downvote_count

    def vote_of(self, user_id: UserId) -> Optional[VoteType]:
        """Current vote cast by ``user_id`` on this votable."""
        if user_id in self.upvoters:
            return VoteType.UP
        if user_id in self.downvoters:
            return VoteType.DOWN
        return None

    def toggle(self, user_id: UserId, direction: VoteType) -> "VoteLedger":
        """Return a new ledger with ``user_id``'s vote toggled.

        Only the voter's own membership changes; all other voters are
        carried over untouched.
        """
        new_vote = resolve_toggle(self.vote_of(user_id), direction)
        upvoters = self.upvoters - {user_id}
        downvoters = self.downvoters - {user_id}
        if new_vote is VoteType.UP:
            upvoters = upvoters | {user_id}
        elif new_vote is VoteType.DOWN:
            downvoters = downvoters | {user_id}
        return self.model_copy(update={"upvoters": upvoters, "downvoters": downvoters})
