"""Strongly typed identifiers for forum domain entities.

Identifiers are opaque strings with an entity prefix (``thread-…``,
``comment-…``, ``reply-…``). Using NewType keeps thread, comment and reply
ids from being mixed up at call sites.
"""

from typing import NewType
from uuid import uuid4

UserId = NewType("UserId", str)
ThreadId = NewType("ThreadId", str)
CommentId = NewType("CommentId", str)
ReplyId = NewType("ReplyId", str)


def generate_id(prefix: str) -> str:
    """Generate a new opaque identifier.

    Args:
        prefix: Entity prefix, e.g. "thread"

    Returns:
        Identifier of the form "<prefix>-<16 hex chars>"
    """
    return f"{prefix}-{uuid4().hex[:16]}"
