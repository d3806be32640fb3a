"""Unit tests for VoteService and the vote transition table."""

from uuid import uuid4

import pytest

from tracker.domain.error import NotFoundError, UnauthenticatedError
from tracker.domain.repository import CommentRepository, VoteRepository
from tracker.domain.service import VoteService, aggregate_votes, transition_vote
from tracker.domain.value import (
    CommentId,
    TorrentId,
    UserId,
    VoteDirection,
    VoteState,
)
from tests.conftest import make_comment, make_vote
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestTransitionVote:
    """Tests for the pure toggle/replace table."""

    @pytest.mark.parametrize(
        "current, requested, expected",
        [
            (VoteState.NONE, VoteDirection.UP, VoteState.UP),
            (VoteState.NONE, VoteDirection.DOWN, VoteState.DOWN),
            (VoteState.UP, VoteDirection.UP, VoteState.NONE),
            (VoteState.UP, VoteDirection.DOWN, VoteState.DOWN),
            (VoteState.DOWN, VoteDirection.UP, VoteState.UP),
            (VoteState.DOWN, VoteDirection.DOWN, VoteState.NONE),
        ],
    )
    def test_transition(self, current, requested, expected):
        assert transition_vote(current, requested) == expected


class TestAggregateVotes:
    """Tests for folding vote records into aggregates."""

    def test_counts_and_viewer_vote(self):
        """Counts should be per comment and the viewer's own vote surfaced."""
        torrent_id = TorrentId(uuid4())
        viewer_id = UserId(uuid4())
        first = make_comment(torrent_id, minute=0)
        second = make_comment(torrent_id, minute=1)
        votes = [
            make_vote(first, VoteDirection.UP),
            make_vote(first, VoteDirection.UP, voter_id=viewer_id),
            make_vote(first, VoteDirection.DOWN),
            make_vote(second, VoteDirection.DOWN, voter_id=viewer_id),
        ]

        result = aggregate_votes([first.id, second.id], votes, viewer_id)

        assert result[first.id].upvote_count == 2
        assert result[first.id].downvote_count == 1
        assert result[first.id].score == 1
        assert result[first.id].viewer_vote == VoteState.UP
        assert result[second.id].score == -1
        assert result[second.id].viewer_vote == VoteState.DOWN

    def test_every_requested_id_is_present(self):
        """Comments without votes should get zero aggregates."""
        silent = CommentId(uuid4())

        result = aggregate_votes([silent], [], UserId(uuid4()))

        assert result[silent].upvote_count == 0
        assert result[silent].downvote_count == 0
        assert result[silent].viewer_vote == VoteState.NONE

    def test_anonymous_viewer_has_no_vote(self):
        """Without a viewer the viewer vote is always none."""
        comment = make_comment(TorrentId(uuid4()))
        votes = [make_vote(comment, VoteDirection.UP)]

        result = aggregate_votes([comment.id], votes, None)

        assert result[comment.id].upvote_count == 1
        assert result[comment.id].viewer_vote == VoteState.NONE


class TestAggregate:
    """Tests for VoteService.aggregate."""

    @pytest.mark.asyncio
    async def test_empty_batch_returns_empty(self, unit_env):
        vote_service = await unit_env.get(VoteService)

        assert await vote_service.aggregate([], UserId(uuid4())) == {}

    @pytest.mark.asyncio
    async def test_aggregates_stored_votes(self, unit_env):
        """Aggregates should reflect votes in the repository."""
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        comment = make_comment(TorrentId(uuid4()))
        await vote_repo.upsert(make_vote(comment, VoteDirection.UP))
        await vote_repo.upsert(make_vote(comment, VoteDirection.DOWN))
        await vote_repo.upsert(make_vote(comment, VoteDirection.DOWN))

        result = await vote_service.aggregate([comment.id, comment.id])

        assert result[comment.id].score == -1
        assert len(result) == 1


class TestCastVote:
    """Tests for VoteService.cast_vote."""

    @pytest.mark.asyncio
    async def test_up_up_down_scenario(self, unit_env):
        """Upvote, repeat to retract, then downvote."""
        vote_service = await unit_env.get(VoteService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment(TorrentId(uuid4())))
        voter_id = UserId(uuid4())

        first = await vote_service.cast_vote(comment.id, voter_id, VoteDirection.UP)
        assert (first.score, first.viewer_vote) == (1, VoteState.UP)

        second = await vote_service.cast_vote(comment.id, voter_id, VoteDirection.UP)
        assert (second.score, second.viewer_vote) == (0, VoteState.NONE)

        third = await vote_service.cast_vote(comment.id, voter_id, VoteDirection.DOWN)
        assert (third.score, third.viewer_vote) == (-1, VoteState.DOWN)

    @pytest.mark.asyncio
    async def test_same_direction_twice_restores_previous_aggregate(self, unit_env):
        """A repeated vote should leave the aggregate as it was before."""
        vote_service = await unit_env.get(VoteService)
        comment_repo = await unit_env.get(CommentRepository)
        vote_repo = await unit_env.get(VoteRepository)
        comment = await comment_repo.save(make_comment(TorrentId(uuid4())))
        await vote_repo.upsert(make_vote(comment, VoteDirection.UP))
        voter_id = UserId(uuid4())
        before = await vote_service.aggregate([comment.id], voter_id)

        await vote_service.cast_vote(comment.id, voter_id, VoteDirection.DOWN)
        after = await vote_service.cast_vote(comment.id, voter_id, VoteDirection.DOWN)

        assert after == before[comment.id]

    @pytest.mark.asyncio
    async def test_switching_direction_shifts_score_by_two(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        comment_repo = await unit_env.get(CommentRepository)
        vote_repo = await unit_env.get(VoteRepository)
        comment = await comment_repo.save(make_comment(TorrentId(uuid4())))
        voter_id = UserId(uuid4())

        up = await vote_service.cast_vote(comment.id, voter_id, VoteDirection.UP)
        down = await vote_service.cast_vote(comment.id, voter_id, VoteDirection.DOWN)

        assert up.score - down.score == 2
        # Switch replaces the record instead of adding a second one
        votes = await vote_repo.find_by_comments([comment.id])
        assert len(votes) == 1
        assert votes[0].direction == VoteDirection.DOWN

    @pytest.mark.asyncio
    async def test_anonymous_vote_is_rejected(self, unit_env):
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(UnauthenticatedError):
            await vote_service.cast_vote(CommentId(uuid4()), None, VoteDirection.UP)

    @pytest.mark.asyncio
    async def test_vote_on_missing_comment_raises(self, unit_env):
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(NotFoundError, match="Comment not found"):
            await vote_service.cast_vote(
                CommentId(uuid4()), UserId(uuid4()), VoteDirection.UP
            )
