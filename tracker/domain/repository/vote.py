"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from tracker.domain.model.vote import Vote
from tracker.domain.value import CommentId, UserId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Votes are keyed by (comment_id, voter_id). Implementations must make
    upsert and delete atomic for that key; the domain layer does no locking.
    """

    @abstractmethod
    async def find_by_comments(self, comment_ids: Sequence[CommentId]) -> List[Vote]:
        """Find all votes on a batch of comments (single query).

        Args:
            comment_ids: Comment IDs to fetch votes for

        Returns:
            All votes cast on any of the comments
        """
        pass

    @abstractmethod
    async def find_by_comment_and_voter(
        self, comment_id: CommentId, voter_id: UserId
    ) -> Optional[Vote]:
        """Find a voter's vote on a specific comment.

        Args:
            comment_id: The comment ID
            voter_id: The voter's user ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def upsert(self, vote: Vote) -> Vote:
        """Create the vote, or replace the direction of an existing one.

        Args:
            vote: The vote to store

        Returns:
            The stored vote
        """
        pass

    @abstractmethod
    async def delete_by_comment_and_voter(
        self, comment_id: CommentId, voter_id: UserId
    ) -> bool:
        """Delete a voter's vote on a comment.

        Args:
            comment_id: The comment ID
            voter_id: The voter's user ID

        Returns:
            True if a vote was deleted, False if no vote existed
        """
        pass
