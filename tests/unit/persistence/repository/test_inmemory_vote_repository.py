"""Unit tests for InMemoryVoteRepository."""

import asyncio
from uuid import uuid4

import pytest

from forum.domain.value import UserId, VotableType, VoteType
from forum.persistence.repository.inmemory import InMemoryVoteRepository


class TestToggle:
    """Tests for toggle."""

    @pytest.mark.asyncio
    async def test_unknown_votable_has_empty_ledger(self):
        repo = InMemoryVoteRepository()

        ledger = await repo.find_ledger(VotableType.POST, uuid4())

        assert ledger.score == 0

    @pytest.mark.asyncio
    async def test_same_user_concurrent_toggles_serialize(self):
        repo = InMemoryVoteRepository()
        votable_id = uuid4()
        user_id = UserId(uuid4())

        # An even number of same-direction toggles always ends un-voted
        await asyncio.gather(
            *(
                repo.toggle(VotableType.POST, votable_id, user_id, VoteType.UP)
                for _ in range(10)
            )
        )

        ledger = await repo.find_ledger(VotableType.POST, votable_id)
        assert ledger.vote_of(user_id) is None
        assert ledger.score == 0

    @pytest.mark.asyncio
    async def test_ledgers_are_per_votable_type(self):
        repo = InMemoryVoteRepository()
        shared_id = uuid4()
        user_id = UserId(uuid4())

        await repo.toggle(VotableType.POST, shared_id, user_id, VoteType.UP)

        comment_ledger = await repo.find_ledger(VotableType.COMMENT, shared_id)
        assert comment_ledger.score == 0

    @pytest.mark.asyncio
    async def test_delete_by_votables(self):
        repo = InMemoryVoteRepository()
        kept, dropped = uuid4(), uuid4()
        user_id = UserId(uuid4())
        await repo.toggle(VotableType.POST, kept, user_id, VoteType.UP)
        await repo.toggle(VotableType.POST, dropped, user_id, VoteType.UP)

        await repo.delete_by_votables(VotableType.POST, [dropped])

        ledgers = await repo.find_ledgers(VotableType.POST, [kept, dropped])
        assert ledgers[kept].score == 1
        assert ledgers[dropped].score == 0

    @pytest.mark.asyncio
    async def test_delete_by_votables_drops_locks(self):
        repo = InMemoryVoteRepository()
        kept, dropped = uuid4(), uuid4()
        user_id = UserId(uuid4())
        await repo.toggle(VotableType.POST, kept, user_id, VoteType.UP)
        await repo.toggle(VotableType.POST, dropped, user_id, VoteType.UP)

        await repo.delete_by_votables(VotableType.POST, [dropped])

        assert set(repo._locks) == {(VotableType.POST, kept)}
