"""Comment entities.

Comments belong to exactly one thread. Deleting a comment only flips its
``is_delete`` flag; the stored content is kept and masked when the comment is
projected for display.
"""

from datetime import datetime
from typing import ClassVar

from pydantic import Field, ValidationInfo, field_validator

from forum.domain.model.common import PayloadModel, RequiredText
from forum.domain.model.reply import DetailReply

DELETED_COMMENT_CONTENT = "**komentar telah dihapus**"


class NewComment(PayloadModel):
    """Comment creation payload."""

    entity_name: ClassVar[str] = "NEW_COMMENT"

    thread_id: RequiredText
    content: RequiredText
    owner: RequiredText
    username: RequiredText


class AddedComment(PayloadModel):
    """Comment as returned after creation."""

    entity_name: ClassVar[str] = "ADDED_COMMENT"

    id: str
    content: str
    owner: str


class DetailComment(PayloadModel):
    """Read projection of a comment.

    Built from a stored row (``id``, ``username``, ``date``, ``content``,
    ``is_delete``). When the row is deleted the content is replaced by
    DELETED_COMMENT_CONTENT. The flag itself is not serialized.
    """

    entity_name: ClassVar[str] = "DETAIL_COMMENT"

    id: RequiredText
    username: RequiredText
    date: datetime
    # Declared before content so the content validator can see it
    is_delete: bool = Field(exclude=True)
    content: RequiredText
    replies: list[DetailReply] = Field(default_factory=list)

    @field_validator("content")
    @classmethod
    def mask_deleted_content(cls, content: str, info: ValidationInfo) -> str:
        """Replace the content of a deleted comment with the masking text."""
        if info.data.get("is_delete"):
            return DELETED_COMMENT_CONTENT
        return content
