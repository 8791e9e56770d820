"""PostgreSQL implementation of Vote repository."""

from collections import defaultdict
from typing import Dict, Sequence
from uuid import UUID, uuid4

import logfire
from sqlalchemy import and_, delete, func, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.error import NotFoundError
from forum.domain.model import VoteLedger, resolve_toggle
from forum.domain.repository import VoteRepository
from forum.domain.value import UserId, VotableType, VoteType
from forum.persistence.mappers import rows_to_ledger
from forum.persistence.tables import comments_table, posts_table, votes_table

_SCORED_TABLES = {
    VotableType.POST: posts_table,
    VotableType.COMMENT: comments_table,
}


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository.

    A toggle runs inside the request transaction and serializes on the
    voted item's row lock. Within that lock it writes only the caller's
    own vote row, then rewrites the stored score from the vote rows.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_ledger(
        self, votable_type: VotableType, votable_id: UUID
    ) -> VoteLedger:
        """Load the ledger for one votable."""
        stmt = select(votes_table.c.user_id, votes_table.c.vote_type).where(
            and_(
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id == votable_id,
            )
        )
        result = await self.session.execute(stmt)
        return rows_to_ledger(votable_type, votable_id, result.mappings().all())

    async def find_ledgers(
        self, votable_type: VotableType, votable_ids: Sequence[UUID]
    ) -> Dict[UUID, VoteLedger]:
        """Load ledgers for several votables (batch query)."""
        if not votable_ids:
            return {}

        stmt = select(
            votes_table.c.votable_id, votes_table.c.user_id, votes_table.c.vote_type
        ).where(
            and_(
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id.in_(list(votable_ids)),
            )
        )
        result = await self.session.execute(stmt)

        rows_by_votable = defaultdict(list)
        for row in result.mappings().all():
            rows_by_votable[row["votable_id"]].append(row)

        return {
            votable_id: rows_to_ledger(
                votable_type, votable_id, rows_by_votable.get(votable_id, [])
            )
            for votable_id in votable_ids
        }

    async def toggle(
        self,
        votable_type: VotableType,
        votable_id: UUID,
        user_id: UserId,
        direction: VoteType,
    ) -> VoteLedger:
        """Toggle one user's vote on a votable.

        Steps:
        1. Lock the voted item's row (SELECT ... FOR UPDATE)
        2. Read the caller's current vote row
        3. Delete or upsert only that row
        4. Recompute the stored score from the vote rows

        Raises:
            NotFoundError: If the item was deleted concurrently
        """
        target = _SCORED_TABLES[votable_type]

        locked = await self.session.execute(
            select(target.c.id).where(target.c.id == votable_id).with_for_update()
        )
        if locked.first() is None:
            raise NotFoundError(votable_type.value.capitalize(), str(votable_id))

        voter_filter = and_(
            votes_table.c.user_id == user_id,
            votes_table.c.votable_type == votable_type.value,
            votes_table.c.votable_id == votable_id,
        )
        current = await self.session.execute(
            select(votes_table.c.vote_type).where(voter_filter)
        )
        current_value = current.scalar_one_or_none()
        current_vote = VoteType(current_value) if current_value else None

        new_vote = resolve_toggle(current_vote, direction)

        if new_vote is None:
            await self.session.execute(delete(votes_table).where(voter_filter))
        else:
            stmt = pg_insert(votes_table).values(
                id=uuid4(),
                user_id=user_id,
                votable_type=votable_type.value,
                votable_id=votable_id,
                vote_type=new_vote.value,
            )
            stmt = stmt.on_conflict_do_update(
                constraint="unique_vote",
                set_={"vote_type": stmt.excluded.vote_type},
            )
            await self.session.execute(stmt)

        await self.session.execute(
            update(target)
            .where(target.c.id == votable_id)
            .values(
                score=_count(votable_type, votable_id, VoteType.UP)
                - _count(votable_type, votable_id, VoteType.DOWN)
            )
        )
        await self.session.flush()

        logfire.debug(
            "Vote row written",
            votable_type=votable_type.value,
            votable_id=str(votable_id),
            user_id=str(user_id),
            vote=new_vote.value if new_vote else None,
        )
        return await self.find_ledger(votable_type, votable_id)

    async def delete_by_votables(
        self, votable_type: VotableType, votable_ids: Sequence[UUID]
    ) -> None:
        """Delete every vote on the given items."""
        if not votable_ids:
            return
        stmt = delete(votes_table).where(
            and_(
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id.in_(list(votable_ids)),
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()


def _count(votable_type: VotableType, votable_id: UUID, vote_type: VoteType):
    return (
        select(func.count())
        .select_from(votes_table)
        .where(
            and_(
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id == votable_id,
                votes_table.c.vote_type == vote_type.value,
            )
        )
        .scalar_subquery()
    )
