"""Unit tests for CastVoteUseCase."""

from uuid import uuid4

import pytest

from tracker.application.usecase.vote import CastVoteRequest, CastVoteUseCase
from tracker.domain.error import NotFoundError
from tracker.domain.repository import CommentRepository
from tracker.domain.value import TorrentId, VoteState
from tests.conftest import make_comment
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCastVoteUseCase:
    """Tests for CastVoteUseCase."""

    @pytest.mark.asyncio
    async def test_vote_returns_aggregate(self, unit_env):
        use_case = await unit_env.get(CastVoteUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment(TorrentId(uuid4())))
        voter_id = str(uuid4())

        response = await use_case.execute(
            CastVoteRequest(
                torrent_id=str(comment.torrent_id),
                comment_id=str(comment.id),
                voter_id=voter_id,
                direction="down",
            )
        )

        assert response.comment_id == str(comment.id)
        assert response.downvote_count == 1
        assert response.score == -1
        assert response.viewer_vote == VoteState.DOWN

    @pytest.mark.asyncio
    async def test_comment_on_other_torrent_is_not_found(self, unit_env):
        """The comment must belong to the torrent named in the request."""
        use_case = await unit_env.get(CastVoteUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment(TorrentId(uuid4())))

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CastVoteRequest(
                    torrent_id=str(uuid4()),
                    comment_id=str(comment.id),
                    voter_id=str(uuid4()),
                    direction="up",
                )
            )

    def test_unknown_direction_fails_validation(self):
        """Anything other than up or down is a ValueError."""
        with pytest.raises(ValueError):
            CastVoteRequest(
                torrent_id=str(uuid4()),
                comment_id=str(uuid4()),
                voter_id=str(uuid4()),
                direction="sideways",
            )
