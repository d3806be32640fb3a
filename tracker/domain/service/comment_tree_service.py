"""Comment thread page assembly."""

import logfire

from tracker.config import CommentSettings
from tracker.domain.error import ValidationError
from tracker.domain.value import (
    CommentOrder,
    DepthOverflowPolicy,
    TorrentId,
    UserId,
)

from .base import Service
from .comment_service import CommentService
from .comment_tree import CommentPage, build_comment_tree, count_nodes
from .torrent_service import TorrentService
from .user_service import UserService
from .vote_service import VoteService


class CommentTreeService(Service):
    """Builds paginated, annotated comment trees for a torrent."""

    def __init__(
        self,
        comment_service: CommentService,
        vote_service: VoteService,
        torrent_service: TorrentService,
        user_service: UserService,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize comment tree service.

        Args:
            comment_service: Comment domain service
            vote_service: Vote domain service (aggregates)
            torrent_service: Torrent domain service (uploader lookup)
            user_service: User domain service (author badges)
            comment_settings: Comment thread configuration
        """
        self.comment_service = comment_service
        self.vote_service = vote_service
        self.torrent_service = torrent_service
        self.user_service = user_service
        self.settings = comment_settings

    async def get_comment_page(
        self,
        torrent_id: TorrentId,
        page: int = 1,
        page_size: int | None = None,
        order: CommentOrder | None = None,
        viewer_id: UserId | None = None,
    ) -> CommentPage:
        """Get one page of root comments with their full reply trees.

        Algorithm:
        1. Fetch the page of roots and the total root count
        2. Fetch every reply under those roots (replies are never paged)
        3. Aggregate votes and look up authors in one batch call each
        4. Link replies into depth-bounded trees

        Args:
            torrent_id: Torrent ID
            page: 1-based root page number
            page_size: Roots per page (defaults to configuration)
            order: Root ordering by creation time (defaults to configuration)
            viewer_id: Requesting viewer (None for anonymous)

        Returns:
            Comment page with annotated trees and pagination totals

        Raises:
            ValidationError: If page or page_size is out of range
            NotFoundError: If the torrent does not exist
        """
        if page_size is None:
            page_size = self.settings.default_page_size
        if order is None:
            order = self.settings.default_order

        if page < 1:
            raise ValidationError("Page must be 1 or greater")
        if page_size < 1 or page_size > self.settings.max_page_size:
            raise ValidationError(
                f"Page size must be between 1 and {self.settings.max_page_size}"
            )

        with logfire.span(
            "comment_tree_service.get_comment_page",
            torrent_id=str(torrent_id),
            page=page,
            page_size=page_size,
            order=order.value,
            viewer_id=str(viewer_id) if viewer_id else None,
        ):
            torrent = await self.torrent_service.require_torrent(torrent_id)

            roots, total_roots = await self.comment_service.list_root_page(
                torrent_id, page, page_size, order
            )
            replies = await self.comment_service.list_replies(
                [root.id for root in roots]
            )

            batch = [*roots, *replies]
            aggregates = await self.vote_service.aggregate(
                [comment.id for comment in batch], viewer_id
            )
            authors = await self.user_service.get_users_by_ids(
                [comment.author_id for comment in batch]
            )

            nodes = build_comment_tree(
                roots,
                replies,
                max_depth=self.settings.max_depth,
                aggregates=aggregates,
                uploader_id=torrent.uploader_id,
                authors=authors,
                allow_overflow_replies=(
                    self.settings.depth_overflow == DepthOverflowPolicy.FLATTEN
                ),
            )

            logfire.info(
                "Comment tree built",
                torrent_id=str(torrent_id),
                root_count=len(nodes),
                node_count=count_nodes(nodes),
                total_roots=total_roots,
            )
            return CommentPage(
                nodes=nodes,
                page=page,
                page_size=page_size,
                total_roots=total_roots,
            )
