"""In-memory comment repository for testing."""

from datetime import UTC, datetime
from typing import Any

from forum.domain.error import ForbiddenError, NotFoundError
from forum.domain.model import AddedComment, NewComment
from forum.domain.repository.comment import CommentRepository
from forum.domain.value import CommentId, ThreadId, UserId, generate_id

_LISTED_FIELDS = ("id", "username", "date", "content", "is_delete")


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[str, dict[str, Any]] = {}

    def put(self, row: dict[str, Any]) -> None:
        """Store a comment row as-is (for seeding tests)."""
        self._comments[row["id"]] = {"is_delete": False, **row}

    def get_row(self, comment_id: CommentId) -> dict[str, Any] | None:
        """Return the stored row of a comment, if any."""
        return self._comments.get(comment_id)

    async def add(self, new_comment: NewComment) -> AddedComment:
        """Persist a new comment."""
        comment_id = generate_id("comment")
        self._comments[comment_id] = {
            "id": comment_id,
            "thread_id": new_comment.thread_id,
            "owner": new_comment.owner,
            "username": new_comment.username,
            "content": new_comment.content,
            "date": datetime.now(UTC),
            "is_delete": False,
        }
        return AddedComment(
            id=comment_id, content=new_comment.content, owner=new_comment.owner
        )

    async def verify_exists_in_thread(
        self, comment_id: CommentId, thread_id: ThreadId
    ) -> None:
        """Check that a live comment exists in a thread."""
        comment = self._comments.get(comment_id)
        if (
            comment is None
            or comment["thread_id"] != thread_id
            or comment["is_delete"]
        ):
            raise NotFoundError("comment", comment_id, scope=f"thread {thread_id}")

    async def verify_owner(self, comment_id: CommentId, owner: UserId) -> None:
        """Check that a user owns a comment."""
        comment = self._comments.get(comment_id)
        if comment is None:
            raise NotFoundError("comment", comment_id)
        if comment["owner"] != owner:
            raise ForbiddenError("comment", comment_id, owner)

    async def soft_delete(self, comment_id: CommentId) -> None:
        """Mark a comment as deleted."""
        comment = self._comments.get(comment_id)
        if comment:
            comment["is_delete"] = True

    async def list_by_thread(self, thread_id: ThreadId) -> list[dict[str, Any]]:
        """List every comment of a thread, oldest first."""
        comments = [c for c in self._comments.values() if c["thread_id"] == thread_id]

        # Stable sort keeps insertion order for equal dates
        comments.sort(key=lambda c: c["date"])

        return [{key: c[key] for key in _LISTED_FIELDS} for c in comments]
