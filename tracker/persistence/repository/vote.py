"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional, Sequence

from sqlalchemy import and_, delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from tracker.domain.model import Vote
from tracker.domain.repository import VoteRepository
from tracker.domain.value import CommentId, UserId
from tracker.persistence.mappers import row_to_vote, vote_to_dict
from tracker.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_comments(self, comment_ids: Sequence[CommentId]) -> List[Vote]:
        """Find all votes on a batch of comments (batch query)."""
        if not comment_ids:
            return []

        stmt = select(votes_table).where(votes_table.c.comment_id.in_(comment_ids))
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def find_by_comment_and_voter(
        self, comment_id: CommentId, voter_id: UserId
    ) -> Optional[Vote]:
        """Find a voter's vote on a specific comment."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.comment_id == comment_id,
                votes_table.c.voter_id == voter_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def upsert(self, vote: Vote) -> Vote:
        """Insert a vote or replace the direction of the existing one.

        Uses ON CONFLICT on the (comment_id, voter_id) unique constraint so
        concurrent casts by the same voter cannot create duplicates.
        """
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        stmt = stmt.on_conflict_do_update(
            constraint="uq_vote_comment_voter",
            set_={"direction": stmt.excluded.direction},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return vote

    async def delete_by_comment_and_voter(
        self, comment_id: CommentId, voter_id: UserId
    ) -> bool:
        """Delete a voter's vote on a comment."""
        stmt = delete(votes_table).where(
            and_(
                votes_table.c.comment_id == comment_id,
                votes_table.c.voter_id == voter_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
