"""add_votes

Add the votes table and the cached vote_count counters on posts and
comments. Counters are maintained by the application with atomic
"vote_count = vote_count + delta" updates in the same transaction as the
vote row change.

Revision ID: 9b4e6d21c8a3
Revises: 3f1c2a9d7b10
Create Date: 2026-10-18 10:14:37.902118

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "9b4e6d21c8a3"
down_revision: Union[str, Sequence[str], None] = "3f1c2a9d7b10"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.add_column(
        "posts",
        sa.Column("vote_count", sa.Integer(), nullable=False, server_default="0"),
    )
    op.add_column(
        "comments",
        sa.Column("vote_count", sa.Integer(), nullable=False, server_default="0"),
    )

    op.create_table(
        "votes",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("post_id", sa.Integer(), nullable=True),
        sa.Column("comment_id", sa.Integer(), nullable=True),
        sa.Column("vote_type", sa.SmallInteger(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["comment_id"], ["comments.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("vote_type IN (-1, 1)", name="vote_type_up_or_down"),
        sa.CheckConstraint(
            "(post_id IS NOT NULL AND comment_id IS NULL) OR "
            "(post_id IS NULL AND comment_id IS NOT NULL)",
            name="vote_single_target",
        ),
    )
    op.create_index("idx_votes_user_id", "votes", ["user_id"])
    op.create_index("idx_votes_post_id", "votes", ["post_id"])
    op.create_index("idx_votes_comment_id", "votes", ["comment_id"])

    # One vote per user per item; partial so the NULL side never collides
    op.execute("""
        CREATE UNIQUE INDEX uq_votes_user_post
        ON votes (user_id, post_id)
        WHERE post_id IS NOT NULL
    """)
    op.execute("""
        CREATE UNIQUE INDEX uq_votes_user_comment
        ON votes (user_id, comment_id)
        WHERE comment_id IS NOT NULL
    """)


def downgrade() -> None:
    """Downgrade schema."""
    op.execute("DROP INDEX IF EXISTS uq_votes_user_comment")
    op.execute("DROP INDEX IF EXISTS uq_votes_user_post")
    op.drop_index("idx_votes_comment_id", table_name="votes")
    op.drop_index("idx_votes_post_id", table_name="votes")
    op.drop_index("idx_votes_user_id", table_name="votes")
    op.drop_table("votes")
    op.drop_column("comments", "vote_count")
    op.drop_column("posts", "vote_count")
