"""PostgreSQL implementation of Torrent repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tracker.domain.model import Torrent
from tracker.domain.repository import TorrentRepository
from tracker.domain.value import TorrentId
from tracker.persistence.mappers import row_to_torrent
from tracker.persistence.tables import torrents_table


class PostgresTorrentRepository(TorrentRepository):
    """PostgreSQL implementation of TorrentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, torrent_id: TorrentId) -> Optional[Torrent]:
        """Find a torrent by ID."""
        stmt = select(torrents_table).where(torrents_table.c.id == torrent_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_torrent(row._asdict()) if row else None
