"""In-memory comment repository for testing."""

from typing import Optional, Sequence

from tracker.domain.model.comment import Comment
from tracker.domain.repository.comment import CommentRepository
from tracker.domain.value import CommentId, CommentOrder, TorrentId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def list_root_comments(
        self,
        torrent_id: TorrentId,
        page: int,
        page_size: int,
        order: CommentOrder = CommentOrder.DESC,
    ) -> tuple[list[Comment], int]:
        """List one page of root comments plus the total root count."""
        roots = [
            c
            for c in self._comments.values()
            if c.torrent_id == torrent_id and c.parent_id is None
        ]

        # Sort by created_at, id breaks ties
        roots.sort(
            key=lambda c: (c.created_at, str(c.id)),
            reverse=order == CommentOrder.DESC,
        )

        # Paginate
        offset = (page - 1) * page_size
        return roots[offset : offset + page_size], len(roots)

    async def list_replies(self, root_ids: Sequence[CommentId]) -> list[Comment]:
        """List every reply below the given roots."""
        wanted = set(root_ids)
        replies = [c for c in self._comments.values() if c.root_id in wanted]
        replies.sort(key=lambda c: c.created_at)
        return replies

    async def count_roots(self, torrent_id: TorrentId) -> int:
        """Count root comments for a torrent."""
        return sum(
            1
            for c in self._comments.values()
            if c.torrent_id == torrent_id and c.parent_id is None
        )

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._comments[comment.id] = comment
        return comment
