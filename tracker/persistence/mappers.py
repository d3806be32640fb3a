"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from tracker.domain.model import Comment, Torrent, User, Vote
from tracker.domain.value import (
    CommentId,
    TorrentId,
    UserId,
    UserRole,
    VoteDirection,
    VoteId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> UUID | None:
    return _uuid(value) if value is not None else None


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    parent_id = _optional_uuid(row.get("parent_id"))
    root_id = _optional_uuid(row.get("root_id"))
    return Comment(
        id=CommentId(_uuid(row["id"])),
        torrent_id=TorrentId(_uuid(row["torrent_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        parent_id=CommentId(parent_id) if parent_id else None,
        root_id=CommentId(root_id) if root_id else None,
        depth=row["depth"],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": comment.id,
        "torrent_id": comment.torrent_id,
        "author_id": comment.author_id,
        "content": comment.content,
        "parent_id": comment.parent_id,
        "root_id": comment.root_id,
        "depth": comment.depth,
        "created_at": comment.created_at,
    }


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(_uuid(row["id"])),
        comment_id=CommentId(_uuid(row["comment_id"])),
        voter_id=UserId(_uuid(row["voter_id"])),
        direction=VoteDirection(row["direction"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return {
        "id": vote.id,
        "comment_id": vote.comment_id,
        "voter_id": vote.voter_id,
        "direction": vote.direction.value,
        "created_at": vote.created_at,
    }


def row_to_torrent(row: Dict[str, Any]) -> Torrent:
    """Convert database row to Torrent domain model."""
    return Torrent(
        id=TorrentId(_uuid(row["id"])),
        name=row["name"],
        uploader_id=UserId(_uuid(row["uploader_id"])),
        created_at=row["created_at"],
    )


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        username=row["username"],
        role=UserRole(row["role"]),
    )
