"""SQLAlchemy table definitions for the comment system.

These table definitions are used by the repositories through SQLAlchemy
Core. They match the schema defined in Alembic migrations. The users and
torrents tables are owned by the wider tracker; only the columns read here
are declared.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (owned by the tracker, read-only here)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("username", String(255), nullable=False),
    Column(
        "role",
        Enum("admin", "moderator", "user", "guest", name="user_role", create_type=False),
        nullable=False,
        server_default="user",
    ),
)

# ============================================================================
# TORRENTS TABLE (owned by the tracker, read-only here)
# ============================================================================
torrents_table = Table(
    "torrents",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("name", String(255), nullable=False),
    Column(
        "uploader_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "torrent_id",
        UUID,
        ForeignKey("torrents.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column(
        "root_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("content", Text, nullable=False),
    Column("depth", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("depth >= 0", name="depth_non_negative"),
    CheckConstraint(
        "(parent_id IS NULL) = (root_id IS NULL)", name="reply_has_root"
    ),
)

# Root pages: WHERE torrent_id = ? AND parent_id IS NULL ORDER BY created_at
Index(
    "idx_comments_torrent_parent_created",
    comments_table.c.torrent_id,
    comments_table.c.parent_id,
    comments_table.c.created_at,
)
Index("idx_comments_root_id", comments_table.c.root_id)
Index("idx_comments_author_id", comments_table.c.author_id)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "voter_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "direction",
        Enum("up", "down", name="vote_direction", create_type=False),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("comment_id", "voter_id", name="uq_vote_comment_voter"),
)

Index("idx_votes_voter_id", votes_table.c.voter_id)
