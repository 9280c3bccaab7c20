"""Reply domain service."""

import logfire

from forum.domain.model import AddedReply, NewReply
from forum.domain.repository import ReplyRepository
from forum.domain.value import ReplyId

from .base import Service


class ReplyService(Service):
    """Domain service for reply operations."""

    def __init__(self, reply_repository: ReplyRepository) -> None:
        """Initialize reply service.

        Args:
            reply_repository: Reply repository
        """
        self.reply_repository = reply_repository

    async def add_reply(self, new_reply: NewReply) -> AddedReply:
        """Create a reply on a comment.

        The comment must already have been verified by the caller.

        Args:
            new_reply: Validated creation payload

        Returns:
            Created reply
        """
        with logfire.span(
            "reply_service.add_reply",
            comment_id=new_reply.comment_id,
            owner=new_reply.owner,
        ):
            added = await self.reply_repository.add(new_reply)
            logfire.info(
                "Reply created",
                reply_id=added.id,
                comment_id=new_reply.comment_id,
                owner=added.owner,
            )
            return added

    async def delete_reply(self, reply_id: ReplyId) -> None:
        """Soft-delete a reply.

        Authorization must be checked before calling this.

        Args:
            reply_id: Reply ID
        """
        with logfire.span("reply_service.delete_reply", reply_id=str(reply_id)):
            await self.reply_repository.soft_delete(reply_id)
            logfire.info("Reply soft-deleted", reply_id=str(reply_id))
