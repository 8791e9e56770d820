"""Unit tests for VoteLedger and the toggle rule."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from forum.domain.model import VoteLedger, resolve_toggle
from forum.domain.value import UserId, VotableType, VoteType


def _ledger(**kwargs) -> VoteLedger:
    return VoteLedger(votable_type=VotableType.POST, votable_id=uuid4(), **kwargs)


class TestResolveToggle:
    """Tests for resolve_toggle."""

    @pytest.mark.parametrize("direction", [VoteType.UP, VoteType.DOWN])
    def test_no_vote_sets_direction(self, direction):
        assert resolve_toggle(None, direction) is direction

    @pytest.mark.parametrize("direction", [VoteType.UP, VoteType.DOWN])
    def test_same_direction_removes_vote(self, direction):
        assert resolve_toggle(direction, direction) is None

    @pytest.mark.parametrize(
        "current,direction",
        [(VoteType.DOWN, VoteType.UP), (VoteType.UP, VoteType.DOWN)],
    )
    def test_opposite_direction_switches(self, current, direction):
        assert resolve_toggle(current, direction) is direction


class TestVoteLedger:
    """Tests for VoteLedger."""

    def test_empty_ledger_scores_zero(self):
        ledger = _ledger()

        assert ledger.upvote_count == 0
        assert ledger.downvote_count == 0
        assert ledger.score == 0

    def test_score_is_upvotes_minus_downvotes(self):
        ledger = _ledger(
            upvoters=frozenset({UserId(uuid4()), UserId(uuid4())}),
            downvoters=frozenset({UserId(uuid4())}),
        )

        assert ledger.score == 1

    def test_voter_cannot_be_in_both_sets(self):
        user_id = UserId(uuid4())

        with pytest.raises(ValidationError):
            _ledger(upvoters=frozenset({user_id}), downvoters=frozenset({user_id}))

    def test_upvote_twice_cancels(self):
        user_id = UserId(uuid4())

        once = _ledger().toggle(user_id, VoteType.UP)
        twice = once.toggle(user_id, VoteType.UP)

        assert once.score == 1
        assert once.vote_of(user_id) is VoteType.UP
        assert twice.score == 0
        assert twice.vote_of(user_id) is None

    def test_upvote_then_downvote_switches(self):
        user_id = UserId(uuid4())

        ledger = _ledger().toggle(user_id, VoteType.UP).toggle(user_id, VoteType.DOWN)

        assert ledger.upvote_count == 0
        assert ledger.downvote_count == 1
        assert ledger.score == -1

    def test_toggle_leaves_other_voters_untouched(self):
        alice, bob = UserId(uuid4()), UserId(uuid4())
        ledger = _ledger(upvoters=frozenset({alice}))

        updated = ledger.toggle(bob, VoteType.DOWN)

        assert updated.upvoters == frozenset({alice})
        assert updated.downvoters == frozenset({bob})
        # Input ledger is unchanged
        assert ledger.downvoters == frozenset()
