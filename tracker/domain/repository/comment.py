"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple

from tracker.domain.model.comment import Comment
from tracker.domain.value import CommentId, CommentOrder, TorrentId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_root_comments(
        self,
        torrent_id: TorrentId,
        page: int,
        page_size: int,
        order: CommentOrder = CommentOrder.DESC,
    ) -> Tuple[List[Comment], int]:
        """List one page of root comments for a torrent.

        Roots are ordered by created_at in the requested direction.
        Replies are never counted or returned here.

        Args:
            torrent_id: The torrent ID
            page: 1-based page number
            page_size: Number of roots per page
            order: Ordering of roots by creation time

        Returns:
            Tuple of (roots on this page, total number of roots)
        """
        pass

    @abstractmethod
    async def list_replies(self, root_ids: Sequence[CommentId]) -> List[Comment]:
        """List every reply (at any depth) below the given roots.

        Args:
            root_ids: Root comment IDs of the current page

        Returns:
            All descendant replies, in no particular order
        """
        pass

    @abstractmethod
    async def count_roots(self, torrent_id: TorrentId) -> int:
        """Count root comments for a torrent.

        Args:
            torrent_id: The torrent ID

        Returns:
            Number of root comments
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a new comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass
