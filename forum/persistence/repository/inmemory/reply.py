"""In-memory reply repository for testing."""

from collections.abc import Sequence
from datetime import UTC, datetime
from typing import Any

from forum.domain.error import ForbiddenError, NotFoundError
from forum.domain.model import AddedReply, NewReply
from forum.domain.repository.reply import ReplyRepository
from forum.domain.value import CommentId, ReplyId, UserId, generate_id

_LISTED_FIELDS = ("id", "username", "date", "content", "is_delete", "comment_id")


class InMemoryReplyRepository(ReplyRepository):
    """In-memory implementation of ReplyRepository for testing."""

    def __init__(self) -> None:
        self._replies: dict[str, dict[str, Any]] = {}

    def put(self, row: dict[str, Any]) -> None:
        """Store a reply row as-is (for seeding tests)."""
        self._replies[row["id"]] = {"is_delete": False, **row}

    def get_row(self, reply_id: ReplyId) -> dict[str, Any] | None:
        """Return the stored row of a reply, if any."""
        return self._replies.get(reply_id)

    async def add(self, new_reply: NewReply) -> AddedReply:
        """Persist a new reply."""
        reply_id = generate_id("reply")
        self._replies[reply_id] = {
            "id": reply_id,
            "comment_id": new_reply.comment_id,
            "owner": new_reply.owner,
            "username": new_reply.username,
            "content": new_reply.content,
            "date": datetime.now(UTC),
            "is_delete": False,
        }
        return AddedReply(id=reply_id, content=new_reply.content, owner=new_reply.owner)

    async def verify_exists_in_comment(
        self, reply_id: ReplyId, comment_id: CommentId
    ) -> None:
        """Check that a live reply exists on a comment."""
        reply = self._replies.get(reply_id)
        if reply is None or reply["comment_id"] != comment_id or reply["is_delete"]:
            raise NotFoundError("reply", reply_id, scope=f"comment {comment_id}")

    async def verify_owner(self, reply_id: ReplyId, owner: UserId) -> None:
        """Check that a user owns a reply."""
        reply = self._replies.get(reply_id)
        if reply is None:
            raise NotFoundError("reply", reply_id)
        if reply["owner"] != owner:
            raise ForbiddenError("reply", reply_id, owner)

    async def soft_delete(self, reply_id: ReplyId) -> None:
        """Mark a reply as deleted."""
        reply = self._replies.get(reply_id)
        if reply:
            reply["is_delete"] = True

    async def list_by_comment_ids(
        self, comment_ids: Sequence[CommentId]
    ) -> list[dict[str, Any]]:
        """List every reply of the given comments, oldest first."""
        if not comment_ids:
            return []

        wanted = set(comment_ids)
        replies = [r for r in self._replies.values() if r["comment_id"] in wanted]

        # Stable sort keeps insertion order for equal dates
        replies.sort(key=lambda r: r["date"])

        return [{key: r[key] for key in _LISTED_FIELDS} for r in replies]
