"""Domain value objects for the comment system."""

from tracker.domain.value.identifiers import (
    CommentId,
    TorrentId,
    UserId,
    VoteId,
)
from tracker.domain.value.types import (
    Badge,
    CommentOrder,
    DepthOverflowPolicy,
    UserRole,
    VoteAggregate,
    VoteDirection,
    VoteState,
)

__all__ = [
    # Identifiers
    "UserId",
    "TorrentId",
    "CommentId",
    "VoteId",
    # Types
    "Badge",
    "CommentOrder",
    "DepthOverflowPolicy",
    "UserRole",
    "VoteAggregate",
    "VoteDirection",
    "VoteState",
]
