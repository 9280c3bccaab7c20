"""Reply entities.

Replies attach to a comment (never to another reply) and are soft-deleted
the same way comments are.
"""

from datetime import datetime
from typing import ClassVar

from pydantic import Field, ValidationInfo, field_validator

from forum.domain.model.common import PayloadModel, RequiredText

DELETED_REPLY_CONTENT = "**balasan telah dihapus**"


class NewReply(PayloadModel):
    """Reply creation payload."""

    entity_name: ClassVar[str] = "NEW_REPLY"

    thread_id: RequiredText
    comment_id: RequiredText
    content: RequiredText
    owner: RequiredText
    username: RequiredText


class AddedReply(PayloadModel):
    """Reply as returned after creation."""

    entity_name: ClassVar[str] = "ADDED_REPLY"

    id: str
    content: str
    owner: str


class DetailReply(PayloadModel):
    """Read projection of a reply.

    Same masking rule as DetailComment, with DELETED_REPLY_CONTENT.
    """

    entity_name: ClassVar[str] = "DETAIL_REPLY"

    id: RequiredText
    username: RequiredText
    date: datetime
    is_delete: bool = Field(exclude=True)
    content: RequiredText

    @field_validator("content")
    @classmethod
    def mask_deleted_content(cls, content: str, info: ValidationInfo) -> str:
        """Replace the content of a deleted reply with the masking text."""
        if info.data.get("is_delete"):
            return DELETED_REPLY_CONTENT
        return content
