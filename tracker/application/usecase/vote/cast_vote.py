"""Cast vote use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from tracker.domain.error import NotFoundError
from tracker.domain.service import CommentService, VoteService
from tracker.domain.value import CommentId, TorrentId, UserId, VoteDirection, VoteState

from ..base import BaseUseCase


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    torrent_id: str  # UUID string
    comment_id: str  # UUID string
    voter_id: str | None  # From auth token, None if unauthenticated
    direction: VoteDirection


class CastVoteResponse(BaseModel):
    """Cast vote response: the refreshed aggregate as seen by the voter."""

    comment_id: str
    upvote_count: int
    downvote_count: int
    score: int
    viewer_vote: VoteState


class CastVoteUseCase(
    BaseUseCase[CastVoteRequest, CastVoteResponse]
):
    """Use case for voting on a comment.

    Voting the same direction twice retracts the vote; voting the other
    direction switches it.
    """

    def __init__(
        self, vote_service: VoteService, comment_service: CommentService
    ) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
            comment_service: Comment domain service
        """
        self.vote_service = vote_service
        self.comment_service = comment_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Steps:
        1. Verify the comment belongs to the torrent in the request
        2. Apply the vote transition via the vote service

        Args:
            request: Cast vote request

        Returns:
            Updated vote aggregate for the comment

        Raises:
            ValueError: If an ID is not a valid UUID
            UnauthenticatedError: If no voter identity was supplied
            NotFoundError: If the comment is missing or on another torrent
        """
        torrent_id = TorrentId(UUID(request.torrent_id))
        comment_id = CommentId(UUID(request.comment_id))
        voter_id = UserId(UUID(request.voter_id)) if request.voter_id else None

        if voter_id is not None:
            comment = await self.comment_service.get_comment_by_id(comment_id)
            if not comment or comment.torrent_id != torrent_id:
                logfire.warn(
                    "Vote target not found on torrent",
                    comment_id=request.comment_id,
                    torrent_id=request.torrent_id,
                )
                raise NotFoundError("Comment", request.comment_id)

        aggregate = await self.vote_service.cast_vote(
            comment_id, voter_id, request.direction
        )

        return CastVoteResponse(
            comment_id=request.comment_id,
            upvote_count=aggregate.upvote_count,
            downvote_count=aggregate.downvote_count,
            score=aggregate.score,
            viewer_vote=aggregate.viewer_vote,
        )
