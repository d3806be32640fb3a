"""Domain model entities for the comment system."""

from tracker.domain.model.comment import Comment
from tracker.domain.model.torrent import Torrent
from tracker.domain.model.user import User
from tracker.domain.model.vote import Vote

__all__ = [
    "Comment",
    "Torrent",
    "User",
    "Vote",
]
