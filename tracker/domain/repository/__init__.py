"""Repository interfaces for the comment domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from tracker.domain.repository.comment import CommentRepository
from tracker.domain.repository.torrent import TorrentRepository
from tracker.domain.repository.user import UserRepository
from tracker.domain.repository.vote import VoteRepository

__all__ = [
    "CommentRepository",
    "TorrentRepository",
    "UserRepository",
    "VoteRepository",
]
