"""Vote domain service."""

from collections import Counter
from datetime import datetime
from typing import Iterable, Sequence
from uuid import uuid4

import logfire

from tracker.domain.error import NotFoundError, UnauthenticatedError
from tracker.domain.model.vote import Vote
from tracker.domain.repository import VoteRepository
from tracker.domain.value import (
    CommentId,
    UserId,
    VoteAggregate,
    VoteDirection,
    VoteId,
    VoteState,
)

from .base import Service
from .comment_service import CommentService

# (current state, requested direction) -> resulting state
VOTE_TRANSITIONS: dict[tuple[VoteState, VoteDirection], VoteState] = {
    (VoteState.NONE, VoteDirection.UP): VoteState.UP,
    (VoteState.NONE, VoteDirection.DOWN): VoteState.DOWN,
    (VoteState.UP, VoteDirection.UP): VoteState.NONE,
    (VoteState.UP, VoteDirection.DOWN): VoteState.DOWN,
    (VoteState.DOWN, VoteDirection.UP): VoteState.UP,
    (VoteState.DOWN, VoteDirection.DOWN): VoteState.NONE,
}


def transition_vote(current: VoteState, requested: VoteDirection) -> VoteState:
    """Resolve a voter's new state after requesting a direction.

    Same direction twice retracts the vote; the opposite direction replaces it.
    """
    return VOTE_TRANSITIONS[(current, requested)]


def aggregate_votes(
    comment_ids: Iterable[CommentId],
    votes: Iterable[Vote],
    viewer_id: UserId | None = None,
) -> dict[CommentId, VoteAggregate]:
    """Fold raw vote records into one aggregate per requested comment.

    Every requested id is present in the result, defaulting to zero counts.
    Anonymous viewers always get VoteState.NONE.
    """
    counts: Counter[tuple[CommentId, VoteDirection]] = Counter()
    viewer_votes: dict[CommentId, VoteDirection] = {}

    for vote in votes:
        counts[(vote.comment_id, vote.direction)] += 1
        if viewer_id is not None and vote.voter_id == viewer_id:
            viewer_votes[vote.comment_id] = vote.direction

    return {
        cid: VoteAggregate(
            upvote_count=counts[(cid, VoteDirection.UP)],
            downvote_count=counts[(cid, VoteDirection.DOWN)],
            viewer_vote=VoteState.from_direction(viewer_votes.get(cid)),
        )
        for cid in comment_ids
    }


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        comment_service: CommentService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            comment_service: Comment domain service
        """
        self.vote_repository = vote_repository
        self.comment_service = comment_service

    async def aggregate(
        self, comment_ids: Sequence[CommentId], viewer_id: UserId | None = None
    ) -> dict[CommentId, VoteAggregate]:
        """Compute vote aggregates for a batch of comments.

        Args:
            comment_ids: Comment IDs from one fetch batch
            viewer_id: Requesting viewer (None for anonymous)

        Returns:
            Dictionary mapping every requested comment ID to its aggregate
        """
        if not comment_ids:
            return {}

        with logfire.span(
            "vote_service.aggregate",
            comment_count=len(comment_ids),
            viewer_id=str(viewer_id) if viewer_id else None,
        ):
            # Batch query to fetch all votes at once (avoid N+1)
            votes = await self.vote_repository.find_by_comments(comment_ids)
            logfire.debug("Votes fetched for aggregation", vote_count=len(votes))
            return aggregate_votes(comment_ids, votes, viewer_id)

    async def cast_vote(
        self,
        comment_id: CommentId,
        voter_id: UserId | None,
        direction: VoteDirection,
    ) -> VoteAggregate:
        """Cast, switch or retract a vote on a comment.

        Args:
            comment_id: Comment ID
            voter_id: Voter user ID (None if unauthenticated)
            direction: Requested vote direction

        Returns:
            Updated aggregate for the comment as seen by the voter

        Raises:
            UnauthenticatedError: If no voter identity was supplied
            NotFoundError: If the comment does not exist
        """
        if voter_id is None:
            logfire.warn("Vote attempt without identity", comment_id=str(comment_id))
            raise UnauthenticatedError("vote")

        with logfire.span(
            "vote_service.cast_vote",
            comment_id=str(comment_id),
            voter_id=str(voter_id),
            direction=direction.value,
        ):
            comment = await self.comment_service.get_comment_by_id(comment_id)
            if not comment:
                logfire.warn("Vote on non-existent comment", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            existing = await self.vote_repository.find_by_comment_and_voter(
                comment_id, voter_id
            )
            current = VoteState.from_direction(existing.direction if existing else None)
            new_state = transition_vote(current, direction)
            new_direction = new_state.to_direction()

            if new_direction is None:
                await self.vote_repository.delete_by_comment_and_voter(
                    comment_id, voter_id
                )
            else:
                await self.vote_repository.upsert(
                    Vote(
                        id=existing.id if existing else VoteId(uuid4()),
                        comment_id=comment_id,
                        voter_id=voter_id,
                        direction=new_direction,
                        created_at=datetime.now(),
                    )
                )

            logfire.info(
                "Vote state changed",
                comment_id=str(comment_id),
                voter_id=str(voter_id),
                previous=current.value,
                current=new_state.value,
            )

            aggregates = await self.aggregate([comment_id], voter_id)
            return aggregates[comment_id]
