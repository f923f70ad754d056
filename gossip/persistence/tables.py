"""SQLAlchemy table definitions for Gossip votes.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    SmallInteger,
    String,
    Table,
    Text,
    func,
)

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# POSTS TABLE (owned by the content subsystem; vote_count owned here)
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(300), nullable=False),
    Column("content", Text, nullable=True),
    Column("vote_count", Integer, nullable=False, server_default="0"),
    Column("created_at", DateTime, nullable=False, server_default=func.now()),
)

# ============================================================================
# COMMENTS TABLE (owned by the content subsystem; vote_count owned here)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "post_id", Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False
    ),
    Column("content", Text, nullable=False),
    Column("vote_count", Integer, nullable=False, server_default="0"),
    Column("created_at", DateTime, nullable=False, server_default=func.now()),
)

Index("idx_comments_post_id", comments_table.c.post_id)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", Integer, nullable=False),
    Column(
        "post_id", Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=True
    ),
    Column(
        "comment_id",
        Integer,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("vote_type", SmallInteger, nullable=False),
    Column("created_at", DateTime, nullable=False, server_default=func.now()),
    Column("updated_at", DateTime, nullable=False, server_default=func.now()),
    CheckConstraint("vote_type IN (-1, 1)", name="vote_type_up_or_down"),
    CheckConstraint(
        "(post_id IS NOT NULL AND comment_id IS NULL) OR "
        "(post_id IS NULL AND comment_id IS NOT NULL)",
        name="vote_single_target",
    ),
)

Index("idx_votes_user_id", votes_table.c.user_id)
Index("idx_votes_post_id", votes_table.c.post_id)
Index("idx_votes_comment_id", votes_table.c.comment_id)

# One vote per user per item, only counted where the reference is set
Index(
    "uq_votes_user_post",
    votes_table.c.user_id,
    votes_table.c.post_id,
    unique=True,
    postgresql_where=votes_table.c.post_id.isnot(None),
    sqlite_where=votes_table.c.post_id.isnot(None),
)
Index(
    "uq_votes_user_comment",
    votes_table.c.user_id,
    votes_table.c.comment_id,
    unique=True,
    postgresql_where=votes_table.c.comment_id.isnot(None),
    sqlite_where=votes_table.c.comment_id.isnot(None),
)
