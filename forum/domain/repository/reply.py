"""Reply repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from forum.domain.model import AddedReply, NewReply
from forum.domain.value import CommentId, ReplyId, UserId


class ReplyRepository(ABC):
    """Repository for Reply entity.

    Defines the contract for reply persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def add(self, new_reply: NewReply) -> AddedReply:
        """Persist a new reply.

        The caller is responsible for checking that the comment exists.

        Args:
            new_reply: Validated creation payload

        Returns:
            The created reply (id, content, owner)
        """
        pass

    @abstractmethod
    async def verify_exists_in_comment(
        self, reply_id: ReplyId, comment_id: CommentId
    ) -> None:
        """Check that a reply exists on a comment and is not deleted.

        Args:
            reply_id: The reply ID
            comment_id: The comment the reply must belong to

        Raises:
            NotFoundError: If the reply is missing, deleted, or belongs to
                another comment
        """
        pass

    @abstractmethod
    async def verify_owner(self, reply_id: ReplyId, owner: UserId) -> None:
        """Check that a user owns a reply.

        Args:
            reply_id: The reply ID
            owner: The user claiming ownership

        Raises:
            NotFoundError: If the reply does not exist
            ForbiddenError: If the reply belongs to someone else
        """
        pass

    @abstractmethod
    async def soft_delete(self, reply_id: ReplyId) -> None:
        """Mark a reply as deleted.

        Idempotent; the stored content is left untouched.

        Args:
            reply_id: The reply ID
        """
        pass

    @abstractmethod
    async def list_by_comment_ids(
        self, comment_ids: Sequence[CommentId]
    ) -> list[dict[str, Any]]:
        """List every reply of the given comments, deleted ones included.

        Ids that match no comment contribute no rows. An empty sequence
        returns an empty list without querying storage.

        Args:
            comment_ids: Comment IDs to fetch replies for

        Returns:
            Rows with ``id``, ``username``, ``date``, ``content``,
            ``is_delete`` and ``comment_id``, ordered by ``date`` ascending
            with insertion order breaking ties
        """
        pass
