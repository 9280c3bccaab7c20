"""SQLAlchemy table definitions for the forum.

These table definitions are used with SQLAlchemy Core queries.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    ForeignKey,
    Identity,
    Index,
    MetaData,
    String,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (owned by the account service, referenced here)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", String(50), primary_key=True),
    Column("username", String(50), nullable=False, unique=True),
    Column("password", Text, nullable=False),
    Column("fullname", Text, nullable=False),
)

# ============================================================================
# THREADS TABLE
# ============================================================================
threads_table = Table(
    "threads",
    metadata,
    Column("id", String(50), primary_key=True),
    Column("title", Text, nullable=False),
    Column("body", Text, nullable=False),
    Column(
        "owner", String(50), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("username", String(50), nullable=False),  # Denormalized from users
    Column(
        "date",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
)

Index("idx_threads_owner", threads_table.c.owner)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", String(50), primary_key=True),
    Column(
        "thread_id",
        String(50),
        ForeignKey("threads.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "owner", String(50), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("username", String(50), nullable=False),  # Denormalized from users
    Column("content", Text, nullable=False),
    Column(
        "date",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    Column("is_delete", Boolean, nullable=False, server_default="false"),
    # Insertion order, breaks ties between equal dates
    Column("seq", BigInteger, Identity(), nullable=False),
)

Index("idx_comments_thread_id_date", comments_table.c.thread_id, comments_table.c.date)
Index("idx_comments_owner", comments_table.c.owner)

# ============================================================================
# REPLIES TABLE
# ============================================================================
replies_table = Table(
    "replies",
    metadata,
    Column("id", String(50), primary_key=True),
    Column(
        "comment_id",
        String(50),
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "owner", String(50), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("username", String(50), nullable=False),  # Denormalized from users
    Column("content", Text, nullable=False),
    Column(
        "date",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    Column("is_delete", Boolean, nullable=False, server_default="false"),
    # Insertion order, breaks ties between equal dates
    Column("seq", BigInteger, Identity(), nullable=False),
)

Index("idx_replies_comment_id_date", replies_table.c.comment_id, replies_table.c.date)
Index("idx_replies_owner", replies_table.c.owner)
