"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional, Sequence, Tuple

from sqlalchemy import asc, desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from tracker.domain.model import Comment
from tracker.domain.repository import CommentRepository
from tracker.domain.value import CommentId, CommentOrder, TorrentId
from tracker.persistence.mappers import comment_to_dict, row_to_comment
from tracker.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def list_root_comments(
        self,
        torrent_id: TorrentId,
        page: int,
        page_size: int,
        order: CommentOrder = CommentOrder.DESC,
    ) -> Tuple[List[Comment], int]:
        """List one page of root comments plus the total root count."""
        direction = desc if order == CommentOrder.DESC else asc
        stmt = (
            select(comments_table)
            .where(comments_table.c.torrent_id == torrent_id)
            .where(comments_table.c.parent_id.is_(None))
            .order_by(
                direction(comments_table.c.created_at), direction(comments_table.c.id)
            )
            .limit(page_size)
            .offset((page - 1) * page_size)
        )
        result = await self.session.execute(stmt)
        roots = [row_to_comment(row._asdict()) for row in result.fetchall()]

        total = await self.count_roots(torrent_id)
        return roots, total

    async def list_replies(self, root_ids: Sequence[CommentId]) -> List[Comment]:
        """List every reply below the given roots (single query on root_id)."""
        if not root_ids:
            return []

        stmt = (
            select(comments_table)
            .where(comments_table.c.root_id.in_(root_ids))
            .order_by(comments_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_roots(self, torrent_id: TorrentId) -> int:
        """Count root comments for a torrent."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.torrent_id == torrent_id)
            .where(comments_table.c.parent_id.is_(None))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment
