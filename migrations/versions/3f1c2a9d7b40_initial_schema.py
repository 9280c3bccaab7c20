"""initial_schema

Create the forum schema:
- Users (owned by the account service, referenced by owner columns)
- Threads
- Comments (soft-deleted via is_delete)
- Replies (soft-deleted via is_delete)

Revision ID: 3f1c2a9d7b40
Revises:
Create Date: 2026-10-19 10:12:44.318202

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.String(50), nullable=False),
        sa.Column("username", sa.String(50), nullable=False),
        sa.Column("password", sa.Text(), nullable=False),
        sa.Column("fullname", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username", name="uq_users_username"),
    )

    # ========================================================================
    # THREADS table
    # ========================================================================
    op.create_table(
        "threads",
        sa.Column("id", sa.String(50), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("owner", sa.String(50), nullable=False),
        sa.Column("username", sa.String(50), nullable=False),
        sa.Column(
            "date",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["owner"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_threads_owner", "threads", ["owner"])

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column("id", sa.String(50), nullable=False),
        sa.Column("thread_id", sa.String(50), nullable=False),
        sa.Column("owner", sa.String(50), nullable=False),
        sa.Column("username", sa.String(50), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "date",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("is_delete", sa.Boolean(), nullable=False, server_default="false"),
        sa.ForeignKeyConstraint(["thread_id"], ["threads.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["owner"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_comments_thread_id_date", "comments", ["thread_id", "date"]
    )
    op.create_index("idx_comments_owner", "comments", ["owner"])

    # ========================================================================
    # REPLIES table
    # ========================================================================
    op.create_table(
        "replies",
        sa.Column("id", sa.String(50), nullable=False),
        sa.Column("comment_id", sa.String(50), nullable=False),
        sa.Column("owner", sa.String(50), nullable=False),
        sa.Column("username", sa.String(50), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "date",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("is_delete", sa.Boolean(), nullable=False, server_default="false"),
        sa.ForeignKeyConstraint(["comment_id"], ["comments.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["owner"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_replies_comment_id_date", "replies", ["comment_id", "date"]
    )
    op.create_index("idx_replies_owner", "replies", ["owner"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_replies_owner", table_name="replies")
    op.drop_index("idx_replies_comment_id_date", table_name="replies")
    op.drop_table("replies")

    op.drop_index("idx_comments_owner", table_name="comments")
    op.drop_index("idx_comments_thread_id_date", table_name="comments")
    op.drop_table("comments")

    op.drop_index("idx_threads_owner", table_name="threads")
    op.drop_table("threads")

    op.drop_table("users")
