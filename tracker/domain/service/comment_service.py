"""Comment domain service."""

from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire

from tracker.config import CommentSettings
from tracker.domain.error import (
    InvalidParentError,
    NotFoundError,
    PermissionDeniedError,
    UnauthenticatedError,
    ValidationError,
)
from tracker.domain.model.comment import Comment
from tracker.domain.repository import CommentRepository
from tracker.domain.value import (
    CommentId,
    CommentOrder,
    DepthOverflowPolicy,
    TorrentId,
    UserId,
    UserRole,
)

from .base import Service
from .torrent_service import TorrentService
from .user_service import UserService


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        torrent_service: TorrentService,
        user_service: UserService,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            torrent_service: Torrent domain service
            user_service: User domain service
            comment_settings: Comment thread configuration
        """
        self.comment_repository = comment_repository
        self.torrent_service = torrent_service
        self.user_service = user_service
        self.settings = comment_settings

    def validate_content(self, content: str) -> str:
        """Normalize and bound-check comment content.

        Returns:
            Stripped content

        Raises:
            ValidationError: If content is blank or too long
        """
        text = content.strip()
        if not text:
            raise ValidationError("Comment cannot be empty")
        if len(text) > self.settings.max_content_length:
            raise ValidationError(
                f"Comment is too long (max {self.settings.max_content_length} characters)"
            )
        return text

    async def create_comment(
        self,
        torrent_id: TorrentId,
        author_id: UserId | None,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a torrent or a reply to another comment.

        Args:
            torrent_id: Torrent ID
            author_id: Author user ID (None if unauthenticated)
            content: Comment text
            parent_id: Parent comment ID for replies (None for root comments)

        Returns:
            Created comment

        Raises:
            UnauthenticatedError: If no author identity was supplied
            NotFoundError: If the torrent or author does not exist
            PermissionDeniedError: If the author is a guest
            ValidationError: If content is empty or too long
            InvalidParentError: If the parent is missing, belongs to another
                torrent, or is too deep under the reject policy
        """
        if author_id is None:
            logfire.warn("Comment attempt without identity", torrent_id=str(torrent_id))
            raise UnauthenticatedError("comment")

        with logfire.span(
            "comment_service.create_comment",
            torrent_id=str(torrent_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            await self.torrent_service.require_torrent(torrent_id)

            author = await self.user_service.get_user_by_id(author_id)
            if not author:
                raise NotFoundError("User", str(author_id))
            if author.role == UserRole.GUEST:
                logfire.warn("Guest attempted to comment", author_id=str(author_id))
                raise PermissionDeniedError("comment", str(author_id))

            text = self.validate_content(content)

            # If replying, verify parent and derive thread position
            depth = 0
            root_id: CommentId | None = None
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.error(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        torrent_id=str(torrent_id),
                    )
                    raise InvalidParentError(str(parent_id), "parent comment not found")
                if parent.torrent_id != torrent_id:
                    logfire.error(
                        "Parent comment does not belong to torrent",
                        parent_id=str(parent_id),
                        parent_torrent_id=str(parent.torrent_id),
                        target_torrent_id=str(torrent_id),
                    )
                    raise InvalidParentError(
                        str(parent_id), "parent comment belongs to another torrent"
                    )

                depth = parent.depth + 1
                if (
                    self.settings.depth_overflow == DepthOverflowPolicy.REJECT
                    and depth >= self.settings.max_depth
                ):
                    logfire.warn(
                        "Reply exceeds maximum depth",
                        parent_id=str(parent_id),
                        depth=depth,
                        max_depth=self.settings.max_depth,
                    )
                    raise InvalidParentError(
                        str(parent_id), "maximum reply depth reached"
                    )
                root_id = parent.root_id or parent.id

            comment = Comment(
                id=CommentId(uuid4()),
                torrent_id=torrent_id,
                author_id=author_id,
                content=text,
                parent_id=parent_id,
                root_id=root_id,
                depth=depth,
                created_at=datetime.now(),
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                torrent_id=str(torrent_id),
                depth=depth,
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def list_root_page(
        self,
        torrent_id: TorrentId,
        page: int,
        page_size: int,
        order: CommentOrder,
    ) -> tuple[list[Comment], int]:
        """Get one page of root comments and the total root count."""
        with logfire.span(
            "comment_service.list_root_page",
            torrent_id=str(torrent_id),
            page=page,
            page_size=page_size,
            order=order.value,
        ):
            roots, total = await self.comment_repository.list_root_comments(
                torrent_id=torrent_id,
                page=page,
                page_size=page_size,
                order=order,
            )
            logfire.info(
                "Root comments retrieved",
                torrent_id=str(torrent_id),
                count=len(roots),
                total=total,
            )
            return roots, total

    async def list_replies(self, root_ids: Sequence[CommentId]) -> list[Comment]:
        """Get every reply below the given roots."""
        if not root_ids:
            return []

        with logfire.span("comment_service.list_replies", root_count=len(root_ids)):
            replies = await self.comment_repository.list_replies(root_ids)
            logfire.info("Replies retrieved", count=len(replies))
            return replies
