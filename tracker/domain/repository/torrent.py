"""Torrent repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from tracker.domain.model.torrent import Torrent
from tracker.domain.value import TorrentId


class TorrentRepository(ABC):
    """Read-only lookup of torrents owned by the wider tracker."""

    @abstractmethod
    async def find_by_id(self, torrent_id: TorrentId) -> Optional[Torrent]:
        """Find a torrent by ID.

        Args:
            torrent_id: The torrent's unique identifier

        Returns:
            The torrent if found, None otherwise
        """
        pass
