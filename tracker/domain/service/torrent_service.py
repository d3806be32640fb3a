"""Torrent domain service."""

import logfire

from tracker.domain.error import NotFoundError
from tracker.domain.model.torrent import Torrent
from tracker.domain.repository import TorrentRepository
from tracker.domain.value import TorrentId

from .base import Service


class TorrentService(Service):
    """Domain service for torrent lookups."""

    def __init__(self, torrent_repository: TorrentRepository) -> None:
        """Initialize torrent service.

        Args:
            torrent_repository: Torrent repository
        """
        self.torrent_repository = torrent_repository

    async def get_torrent_by_id(self, torrent_id: TorrentId) -> Torrent | None:
        """Get a torrent by ID.

        Args:
            torrent_id: Torrent ID

        Returns:
            Torrent if found, None otherwise
        """
        with logfire.span(
            "torrent_service.get_torrent_by_id", torrent_id=str(torrent_id)
        ):
            torrent = await self.torrent_repository.find_by_id(torrent_id)
            if not torrent:
                logfire.warn("Torrent not found", torrent_id=str(torrent_id))
            return torrent

    async def require_torrent(self, torrent_id: TorrentId) -> Torrent:
        """Get a torrent by ID or fail.

        Raises:
            NotFoundError: If the torrent does not exist
        """
        torrent = await self.get_torrent_by_id(torrent_id)
        if torrent is None:
            raise NotFoundError("Torrent", str(torrent_id))
        return torrent
