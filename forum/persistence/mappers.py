"""Mappers for converting between database rows and domain models.

Creation payloads are mapped to insert values; ``RETURNING`` rows are mapped
back to the Added* models. Listing rows are handed to the domain as plain
dicts and validated there by the Detail* models.
"""

from typing import Any, Dict

from forum.domain.model import (
    AddedComment,
    AddedReply,
    AddedThread,
    NewComment,
    NewReply,
    NewThread,
)


def new_thread_to_dict(thread_id: str, new_thread: NewThread) -> Dict[str, Any]:
    """Convert a NewThread payload to insert values.

    Args:
        thread_id: Generated thread ID
        new_thread: Thread creation payload

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": thread_id,
        "title": new_thread.title,
        "body": new_thread.body,
        "owner": new_thread.owner,
        "username": new_thread.username,
    }


def new_comment_to_dict(comment_id: str, new_comment: NewComment) -> Dict[str, Any]:
    """Convert a NewComment payload to insert values."""
    return {
        "id": comment_id,
        "thread_id": new_comment.thread_id,
        "owner": new_comment.owner,
        "username": new_comment.username,
        "content": new_comment.content,
    }


def new_reply_to_dict(reply_id: str, new_reply: NewReply) -> Dict[str, Any]:
    """Convert a NewReply payload to insert values.

    The thread id is only used for scoping checks; replies are stored
    against their comment.
    """
    return {
        "id": reply_id,
        "comment_id": new_reply.comment_id,
        "owner": new_reply.owner,
        "username": new_reply.username,
        "content": new_reply.content,
    }


def row_to_added_thread(row: Dict[str, Any]) -> AddedThread:
    return AddedThread.create(row)


def row_to_added_comment(row: Dict[str, Any]) -> AddedComment:
    return AddedComment.create(row)


def row_to_added_reply(row: Dict[str, Any]) -> AddedReply:
    return AddedReply.create(row)
