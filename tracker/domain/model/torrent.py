"""Torrent entity (read-only view used by the comment system)."""

from datetime import datetime

from pydantic import Field

from tracker.domain.model.common import DomainModel
from tracker.domain.value import TorrentId, UserId


class Torrent(DomainModel):
    """Torrent that comments are attached to.

    Only the fields the comment system needs: the uploader is used to
    mark comments written by the original poster.
    """

    id: TorrentId
    name: str = Field(min_length=1)
    uploader_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)
