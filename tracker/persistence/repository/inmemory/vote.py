"""In-memory vote repository for testing."""

from typing import Optional, Sequence

from tracker.domain.model.vote import Vote
from tracker.domain.repository.vote import VoteRepository
from tracker.domain.value import CommentId, UserId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Votes are keyed by (comment_id, voter_id), mirroring the unique
    constraint on the votes table.
    """

    def __init__(self) -> None:
        self._votes: dict[tuple[CommentId, UserId], Vote] = {}

    async def find_by_comments(self, comment_ids: Sequence[CommentId]) -> list[Vote]:
        """Find all votes on a batch of comments."""
        wanted = set(comment_ids)
        return [v for v in self._votes.values() if v.comment_id in wanted]

    async def find_by_comment_and_voter(
        self, comment_id: CommentId, voter_id: UserId
    ) -> Optional[Vote]:
        """Find a voter's vote on a specific comment."""
        return self._votes.get((comment_id, voter_id))

    async def upsert(self, vote: Vote) -> Vote:
        """Insert a vote or replace the existing one."""
        self._votes[(vote.comment_id, vote.voter_id)] = vote
        return vote

    async def delete_by_comment_and_voter(
        self, comment_id: CommentId, voter_id: UserId
    ) -> bool:
        """Delete a voter's vote on a comment."""
        return self._votes.pop((comment_id, voter_id), None) is not None
