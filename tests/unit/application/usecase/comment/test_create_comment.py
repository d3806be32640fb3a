"""Unit tests for CreateCommentUseCase."""

from uuid import uuid4

import pytest

from tracker.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from tracker.domain.error import UnauthenticatedError
from tracker.domain.repository import TorrentRepository, UserRepository
from tracker.domain.value import VoteState
from tests.conftest import make_torrent, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_reply_returns_zeroed_aggregate(self, unit_env):
        """A new comment comes back with no votes and its thread position."""
        use_case = await unit_env.get(CreateCommentUseCase)
        torrent_repo = await unit_env.get(TorrentRepository)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user())
        torrent = await torrent_repo.save(make_torrent())

        root = await use_case.execute(
            CreateCommentRequest(
                torrent_id=str(torrent.id),
                author_id=str(author.id),
                content="first!",
            )
        )
        reply = await use_case.execute(
            CreateCommentRequest(
                torrent_id=str(torrent.id),
                author_id=str(author.id),
                content="second",
                parent_id=root.comment_id,
            )
        )

        assert root.parent_id is None
        assert reply.parent_id == root.comment_id
        assert reply.depth == 1
        assert reply.score == 0
        assert reply.upvote_count == 0
        assert reply.downvote_count == 0
        assert reply.viewer_vote == VoteState.NONE

    @pytest.mark.asyncio
    async def test_missing_author_is_unauthenticated(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(UnauthenticatedError):
            await use_case.execute(
                CreateCommentRequest(
                    torrent_id=str(uuid4()), author_id=None, content="hello"
                )
            )

    @pytest.mark.asyncio
    async def test_malformed_torrent_id_raises_value_error(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(ValueError):
            await use_case.execute(
                CreateCommentRequest(
                    torrent_id="not-a-uuid", author_id=str(uuid4()), content="hello"
                )
            )
