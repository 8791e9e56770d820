"""In-memory vote repository for testing."""

import asyncio
from collections import defaultdict
from typing import Sequence
from uuid import UUID

from forum.domain.model import VoteLedger
from forum.domain.repository.vote import VoteRepository
from forum.domain.value import UserId, VotableType, VoteType


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Each ledger has its own ``asyncio.Lock``; a toggle holds it across
    its read-modify-write, so concurrent toggles on one item serialize
    and none is lost.
    """

    def __init__(self) -> None:
        self._ledgers: dict[tuple[VotableType, UUID], VoteLedger] = {}
        self._locks: defaultdict[tuple[VotableType, UUID], asyncio.Lock] = (
            defaultdict(asyncio.Lock)
        )

    async def find_ledger(
        self, votable_type: VotableType, votable_id: UUID
    ) -> VoteLedger:
        """Load the ledger for one votable."""
        return self._ledgers.get(
            (votable_type, votable_id),
            VoteLedger(votable_type=votable_type, votable_id=votable_id),
        )

    async def find_ledgers(
        self, votable_type: VotableType, votable_ids: Sequence[UUID]
    ) -> dict[UUID, VoteLedger]:
        """Load ledgers for several votables."""
        return {
            votable_id: await self.find_ledger(votable_type, votable_id)
            for votable_id in votable_ids
        }

    async def toggle(
        self,
        votable_type: VotableType,
        votable_id: UUID,
        user_id: UserId,
        direction: VoteType,
    ) -> VoteLedger:
        """Toggle one user's vote while holding the ledger's lock."""
        key = (votable_type, votable_id)
        async with self._locks[key]:
            ledger = await self.find_ledger(votable_type, votable_id)
            # Suspension point, as a database round trip would be
            await asyncio.sleep(0)
            updated = ledger.toggle(user_id, direction)
            self._ledgers[key] = updated
            return updated

    async def delete_by_votables(
        self, votable_type: VotableType, votable_ids: Sequence[UUID]
    ) -> None:
        """Delete every vote on the given items."""
        for votable_id in votable_ids:
            self._ledgers.pop((votable_type, votable_id), None)
            self._locks.pop((votable_type, votable_id), None)
