"""In-memory torrent repository for testing."""

from typing import Optional

from tracker.domain.model.torrent import Torrent
from tracker.domain.repository.torrent import TorrentRepository
from tracker.domain.value import TorrentId


class InMemoryTorrentRepository(TorrentRepository):
    """In-memory implementation of TorrentRepository for testing."""

    def __init__(self) -> None:
        self._torrents: dict[TorrentId, Torrent] = {}

    async def find_by_id(self, torrent_id: TorrentId) -> Optional[Torrent]:
        """Find a torrent by ID."""
        return self._torrents.get(torrent_id)

    async def save(self, torrent: Torrent) -> Torrent:
        """Store a torrent (test seeding only)."""
        self._torrents[torrent.id] = torrent
        return torrent
