"""Domain value objects for the forum."""

from forum.domain.value.identifiers import (
    CommentId,
    ReplyId,
    ThreadId,
    UserId,
    generate_id,
)

__all__ = [
    "UserId",
    "ThreadId",
    "CommentId",
    "ReplyId",
    "generate_id",
]
