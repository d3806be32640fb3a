"""Test configuration and helpers."""

from datetime import datetime, timedelta
from uuid import uuid4

from tracker.domain.model import Comment, Torrent, User, Vote
from tracker.domain.value import (
    CommentId,
    TorrentId,
    UserId,
    UserRole,
    VoteDirection,
    VoteId,
)

BASE_TIME = datetime(2026, 1, 1, 12, 0, 0)


def at(minutes: int) -> datetime:
    """Deterministic timestamp ``minutes`` after BASE_TIME."""
    return BASE_TIME + timedelta(minutes=minutes)


def make_user(
    username: str = "seeder", role: UserRole = UserRole.USER
) -> User:
    """Build a user with a fresh ID."""
    return User(id=UserId(uuid4()), username=username, role=role)


def make_torrent(uploader_id: UserId | None = None, name: str = "debian.iso") -> Torrent:
    """Build a torrent with a fresh ID."""
    return Torrent(
        id=TorrentId(uuid4()),
        name=name,
        uploader_id=uploader_id or UserId(uuid4()),
        created_at=BASE_TIME,
    )


def make_comment(
    torrent_id: TorrentId,
    author_id: UserId | None = None,
    parent: Comment | None = None,
    minute: int = 0,
    content: str = "nice seed",
) -> Comment:
    """Build a comment, deriving root_id and depth from ``parent``."""
    return Comment(
        id=CommentId(uuid4()),
        torrent_id=torrent_id,
        author_id=author_id or UserId(uuid4()),
        content=content,
        parent_id=parent.id if parent else None,
        root_id=(parent.root_id or parent.id) if parent else None,
        depth=parent.depth + 1 if parent else 0,
        created_at=at(minute),
    )


def make_vote(
    comment: Comment, direction: VoteDirection, voter_id: UserId | None = None
) -> Vote:
    """Build a vote on ``comment``."""
    return Vote(
        id=VoteId(uuid4()),
        comment_id=comment.id,
        voter_id=voter_id or UserId(uuid4()),
        direction=direction,
        created_at=BASE_TIME,
    )
