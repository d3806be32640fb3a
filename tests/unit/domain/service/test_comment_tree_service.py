"""Unit tests for CommentTreeService."""

from uuid import uuid4

import pytest

from tracker.domain.error import NotFoundError, ValidationError
from tracker.domain.repository import (
    CommentRepository,
    TorrentRepository,
    UserRepository,
    VoteRepository,
)
from tracker.domain.service import CommentTreeService, count_nodes
from tracker.domain.value import (
    Badge,
    CommentOrder,
    TorrentId,
    UserRole,
    VoteDirection,
    VoteState,
)
from tests.conftest import make_comment, make_torrent, make_user, make_vote
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _seed_roots(env, count: int, replies_per_root: int = 0):
    """Store a torrent with ``count`` roots, each with a reply chain."""
    torrent_repo = await env.get(TorrentRepository)
    comment_repo = await env.get(CommentRepository)
    torrent = await torrent_repo.save(make_torrent())

    roots = []
    for i in range(count):
        root = await comment_repo.save(make_comment(torrent.id, minute=i * 100))
        roots.append(root)
        parent = root
        for j in range(replies_per_root):
            parent = await comment_repo.save(
                make_comment(torrent.id, parent=parent, minute=i * 100 + j + 1)
            )
    return torrent, roots


class TestGetCommentPage:
    """Tests for get_comment_page method."""

    @pytest.mark.asyncio
    async def test_second_page_of_fifteen_roots(self, unit_env):
        """Page 2 of size 10 over 15 roots holds 5 roots across 2 pages."""
        service = await unit_env.get(CommentTreeService)
        torrent, _ = await _seed_roots(unit_env, 15, replies_per_root=3)

        page = await service.get_comment_page(torrent.id, page=2, page_size=10)

        assert len(page.nodes) == 5
        assert page.total_roots == 15
        assert page.total_pages == 2
        assert count_nodes(page.nodes) == 5 * 4

    @pytest.mark.asyncio
    @pytest.mark.parametrize("replies_per_root", [0, 1, 7])
    async def test_root_count_ignores_reply_volume(self, unit_env, replies_per_root):
        service = await unit_env.get(CommentTreeService)
        torrent, _ = await _seed_roots(unit_env, 4, replies_per_root=replies_per_root)

        page = await service.get_comment_page(torrent.id, page=1, page_size=3)

        assert len(page.nodes) == 3
        assert page.total_roots == 4

    @pytest.mark.asyncio
    async def test_defaults_to_newest_roots_first(self, unit_env):
        service = await unit_env.get(CommentTreeService)
        torrent, roots = await _seed_roots(unit_env, 3)

        newest = await service.get_comment_page(torrent.id)
        oldest = await service.get_comment_page(torrent.id, order=CommentOrder.ASC)

        assert [n.id for n in newest.nodes] == [r.id for r in reversed(roots)]
        assert [n.id for n in oldest.nodes] == [r.id for r in roots]
        assert newest.page_size == 10

    @pytest.mark.asyncio
    async def test_page_past_the_end_is_empty(self, unit_env):
        service = await unit_env.get(CommentTreeService)
        torrent, _ = await _seed_roots(unit_env, 3)

        page = await service.get_comment_page(torrent.id, page=5, page_size=2)

        assert page.nodes == []
        assert page.total_roots == 3
        assert page.total_pages == 2

    @pytest.mark.asyncio
    async def test_nodes_are_annotated(self, unit_env):
        """Votes, OP flag and badges should all reach the page."""
        service = await unit_env.get(CommentTreeService)
        torrent_repo = await unit_env.get(TorrentRepository)
        comment_repo = await unit_env.get(CommentRepository)
        user_repo = await unit_env.get(UserRepository)
        vote_repo = await unit_env.get(VoteRepository)

        uploader = await user_repo.save(make_user("uploader"))
        moderator = await user_repo.save(make_user("mod", UserRole.MODERATOR))
        viewer = await user_repo.save(make_user("viewer"))
        torrent = await torrent_repo.save(make_torrent(uploader_id=uploader.id))
        root = await comment_repo.save(
            make_comment(torrent.id, author_id=moderator.id, minute=0)
        )
        reply = await comment_repo.save(
            make_comment(torrent.id, author_id=uploader.id, parent=root, minute=1)
        )
        await vote_repo.upsert(make_vote(root, VoteDirection.UP, voter_id=viewer.id))
        await vote_repo.upsert(make_vote(root, VoteDirection.UP))
        await vote_repo.upsert(make_vote(reply, VoteDirection.DOWN))

        page = await service.get_comment_page(torrent.id, viewer_id=viewer.id)

        root_node = page.nodes[0]
        reply_node = root_node.children[0]
        assert root_node.score == 2
        assert root_node.viewer_vote == VoteState.UP
        assert root_node.badge == Badge.MODERATOR
        assert root_node.is_author is False
        assert reply_node.score == -1
        assert reply_node.viewer_vote == VoteState.NONE
        assert reply_node.is_author is True
        assert reply_node.author_name == "uploader"

    @pytest.mark.asyncio
    async def test_unknown_torrent_raises_not_found(self, unit_env):
        service = await unit_env.get(CommentTreeService)

        with pytest.raises(NotFoundError, match="Torrent not found"):
            await service.get_comment_page(TorrentId(uuid4()))

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "page, page_size",
        [(0, 10), (-1, 10), (1, 0), (1, 101)],
    )
    async def test_out_of_range_paging_is_rejected(self, unit_env, page, page_size):
        service = await unit_env.get(CommentTreeService)
        torrent, _ = await _seed_roots(unit_env, 1)

        with pytest.raises(ValidationError):
            await service.get_comment_page(torrent.id, page=page, page_size=page_size)
