"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, Sequence
from uuid import UUID

from forum.domain.model.vote_ledger import VoteLedger
from forum.domain.value import UserId, VotableType, VoteType


class VoteRepository(ABC):
    """Repository for vote ledgers.

    A ledger is the set of up/down voters on one votable. Mutations
    are scoped to a single voter's entry so concurrent votes from
    different users on the same item never lose each other's updates.
    """

    @abstractmethod
    async def find_ledger(
        self, votable_type: VotableType, votable_id: UUID
    ) -> VoteLedger:
        """Load the ledger for one votable.

        Args:
            votable_type: Type of item (post or comment)
            votable_id: ID of the item

        Returns:
            The ledger (empty if nobody voted)
        """
        pass

    @abstractmethod
    async def find_ledgers(
        self, votable_type: VotableType, votable_ids: Sequence[UUID]
    ) -> Dict[UUID, VoteLedger]:
        """Load ledgers for several votables (batch query).

        Args:
            votable_type: Type of items (post or comment)
            votable_ids: IDs of the items

        Returns:
            Mapping with an entry (possibly empty) for every requested ID
        """
        pass

    @abstractmethod
    async def toggle(
        self,
        votable_type: VotableType,
        votable_id: UUID,
        user_id: UserId,
        direction: VoteType,
    ) -> VoteLedger:
        """Toggle one user's vote on a votable.

        Voting the same direction again removes the vote, the opposite
        direction switches it. Only ``user_id``'s entry is touched.

        Args:
            votable_type: Type of item (post or comment)
            votable_id: ID of the item
            user_id: The voter
            direction: Requested direction

        Returns:
            The ledger after the toggle
        """
        pass

    @abstractmethod
    async def delete_by_votables(
        self, votable_type: VotableType, votable_ids: Sequence[UUID]
    ) -> None:
        """Delete every vote on the given items.

        Args:
            votable_type: Type of items (post or comment)
            votable_ids: IDs of the items
        """
        pass
