"""Comment entity.

Comments are threaded discussions attached to a torrent. Replies point at
their parent through parent_id and at the thread root through root_id so
that a whole thread can be fetched in one query.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from tracker.domain.model.common import DomainModel
from tracker.domain.value import CommentId, TorrentId, UserId


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a torrent or a reply to another comment.
    Comments are never edited once created.

    Threading is managed through:
    - parent_id: Direct parent comment (None for root comments)
    - root_id: Root ancestor of the thread (None for root comments)
    - depth: Structural nesting level at submission time
    """

    id: CommentId
    torrent_id: TorrentId
    author_id: UserId
    content: str = Field(min_length=1)
    parent_id: Optional[CommentId] = None
    root_id: Optional[CommentId] = None
    depth: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_root(self) -> bool:
        """Whether this comment is attached directly to the torrent."""
        return self.parent_id is None
