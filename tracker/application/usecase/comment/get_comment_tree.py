"""Get comment tree use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from tracker.domain.service import CommentNode, CommentTreeService
from tracker.domain.value import Badge, CommentOrder, TorrentId, UserId, VoteState

from ..base import BaseUseCase


class CommentNodeResponse(BaseModel):
    """Comment node for API response.

    Recursive structure mirroring the domain CommentNode. ``parent_id`` is
    the stored parent, which differs from the enclosing node for replies
    flattened at the deepest level.
    """

    comment_id: str
    torrent_id: str
    author_id: str
    author_name: str | None
    content: str
    parent_id: str | None
    depth: int
    created_at: datetime
    upvote_count: int
    downvote_count: int
    score: int
    viewer_vote: VoteState
    is_author: bool
    badge: Badge
    can_reply: bool
    children: list["CommentNodeResponse"]

    @classmethod
    def from_domain(cls, node: CommentNode) -> "CommentNodeResponse":
        """Convert a domain CommentNode (and its children) to a response model."""
        comment = node.comment
        return cls(
            comment_id=str(comment.id),
            torrent_id=str(comment.torrent_id),
            author_id=str(comment.author_id),
            author_name=node.author_name,
            content=comment.content,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            depth=node.depth,
            created_at=comment.created_at,
            upvote_count=node.upvote_count,
            downvote_count=node.downvote_count,
            score=node.score,
            viewer_vote=node.viewer_vote,
            is_author=node.is_author,
            badge=node.badge,
            can_reply=node.can_reply,
            children=[cls.from_domain(child) for child in node.children],
        )


class PaginationResponse(BaseModel):
    """Root-level pagination totals."""

    page: int
    page_size: int
    total: int
    total_pages: int


class GetCommentTreeRequest(BaseModel):
    """Get comment tree request."""

    torrent_id: str  # UUID string
    page: int = Field(default=1, ge=1)
    page_size: int | None = Field(default=None, ge=1)
    order: CommentOrder | None = None
    viewer_id: str | None = None  # From auth token, None for anonymous


class GetCommentTreeResponse(BaseModel):
    """Get comment tree response."""

    torrent_id: str
    comments: list[CommentNodeResponse]
    pagination: PaginationResponse


class GetCommentTreeUseCase(
    BaseUseCase[GetCommentTreeRequest, GetCommentTreeResponse]
):
    """Use case for reading one page of a torrent's comment threads."""

    def __init__(self, comment_tree_service: CommentTreeService) -> None:
        """Initialize get comment tree use case.

        Args:
            comment_tree_service: Comment tree domain service
        """
        self.comment_tree_service = comment_tree_service

    async def execute(self, request: GetCommentTreeRequest) -> GetCommentTreeResponse:
        """Execute get comment tree flow.

        Args:
            request: Get comment tree request

        Returns:
            Annotated comment trees for the requested root page

        Raises:
            ValueError: If an ID is not a valid UUID
            NotFoundError: If the torrent does not exist
            ValidationError: If the page or page size is out of range
        """
        page = await self.comment_tree_service.get_comment_page(
            torrent_id=TorrentId(UUID(request.torrent_id)),
            page=request.page,
            page_size=request.page_size,
            order=request.order,
            viewer_id=UserId(UUID(request.viewer_id)) if request.viewer_id else None,
        )

        return GetCommentTreeResponse(
            torrent_id=request.torrent_id,
            comments=[CommentNodeResponse.from_domain(node) for node in page.nodes],
            pagination=PaginationResponse(
                page=page.page,
                page_size=page.page_size,
                total=page.total_roots,
                total_pages=page.total_pages,
            ),
        )
