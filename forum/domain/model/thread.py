"""Thread entities.

Threads are the top level of a discussion. A thread is created once and never
edited or deleted; comments attach to it and replies attach to comments.
"""

from datetime import datetime
from typing import ClassVar

from pydantic import Field

from forum.domain.model.comment import DetailComment
from forum.domain.model.common import PayloadModel, RequiredText


class NewThread(PayloadModel):
    """Thread creation payload."""

    entity_name: ClassVar[str] = "NEW_THREAD"

    title: RequiredText
    body: RequiredText
    owner: RequiredText
    username: RequiredText


class AddedThread(PayloadModel):
    """Thread as returned after creation."""

    entity_name: ClassVar[str] = "ADDED_THREAD"

    id: str
    title: str
    owner: str


class DetailThread(PayloadModel):
    """Read projection of a thread with its comments and their replies.

    ``comments`` is always present; a thread without comments carries an
    empty list.
    """

    entity_name: ClassVar[str] = "DETAIL_THREAD"

    id: RequiredText
    title: RequiredText
    body: RequiredText
    date: datetime
    username: RequiredText
    comments: list[DetailComment] = Field(default_factory=list)
