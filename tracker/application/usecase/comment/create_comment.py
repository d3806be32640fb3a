"""Create comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from tracker.domain.service import CommentService
from tracker.domain.value import CommentId, TorrentId, UserId, VoteState

from ..base import BaseUseCase


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    torrent_id: str  # UUID string
    author_id: str | None  # From auth token, None if unauthenticated
    content: str
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response.

    A fresh comment carries no votes, so the aggregate fields are zeroed.
    """

    comment_id: str
    torrent_id: str
    author_id: str
    content: str
    parent_id: str | None
    depth: int
    created_at: datetime
    upvote_count: int = 0
    downvote_count: int = 0
    score: int = 0
    viewer_vote: VoteState = VoteState.NONE


class CreateCommentUseCase(
    BaseUseCase[CreateCommentRequest, CreateCommentResponse]
):
    """Use case for commenting on a torrent or replying to a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            The created comment

        Raises:
            ValueError: If an ID is not a valid UUID
            DomainError: Propagated from the comment service
        """
        comment = await self.comment_service.create_comment(
            torrent_id=TorrentId(UUID(request.torrent_id)),
            author_id=UserId(UUID(request.author_id)) if request.author_id else None,
            content=request.content,
            parent_id=CommentId(UUID(request.parent_id)) if request.parent_id else None,
        )

        return CreateCommentResponse(
            comment_id=str(comment.id),
            torrent_id=str(comment.torrent_id),
            author_id=str(comment.author_id),
            content=comment.content,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            depth=comment.depth,
            created_at=comment.created_at,
        )
