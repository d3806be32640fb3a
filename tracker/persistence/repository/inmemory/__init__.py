"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .torrent import InMemoryTorrentRepository
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryTorrentRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
