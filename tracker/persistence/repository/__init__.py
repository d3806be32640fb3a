"""PostgreSQL repository implementations."""

from tracker.persistence.repository.comment import PostgresCommentRepository
from tracker.persistence.repository.torrent import PostgresTorrentRepository
from tracker.persistence.repository.user import PostgresUserRepository
from tracker.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresTorrentRepository",
    "PostgresUserRepository",
    "PostgresVoteRepository",
]
