"""Domain model entities for the forum."""

from forum.domain.model.comment import (
    DELETED_COMMENT_CONTENT,
    AddedComment,
    DetailComment,
    NewComment,
)
from forum.domain.model.reply import (
    DELETED_REPLY_CONTENT,
    AddedReply,
    DetailReply,
    NewReply,
)
from forum.domain.model.thread import AddedThread, DetailThread, NewThread

__all__ = [
    "NewThread",
    "AddedThread",
    "DetailThread",
    "NewComment",
    "AddedComment",
    "DetailComment",
    "DELETED_COMMENT_CONTENT",
    "NewReply",
    "AddedReply",
    "DetailReply",
    "DELETED_REPLY_CONTENT",
]
