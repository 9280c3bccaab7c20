"""Unit tests for DeleteAuthorizationService."""

from unittest.mock import AsyncMock

import pytest

from forum.domain.error import ForbiddenError, NotFoundError
from forum.domain.repository import (
    CommentRepository,
    ReplyRepository,
    ThreadRepository,
)
from forum.domain.service import DeleteAuthorizationService
from forum.domain.value import CommentId, ReplyId, ThreadId, UserId
from tests.conftest import comment_row, reply_row, thread_row
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _seed(unit_env):
    threads = await unit_env.get(ThreadRepository)
    comments = await unit_env.get(CommentRepository)
    replies = await unit_env.get(ReplyRepository)

    threads.put(thread_row("thread-123"))
    threads.put(thread_row("thread-456"))
    comments.put(comment_row("comment-123", "thread-123", owner="user-123"))
    replies.put(reply_row("reply-123", "comment-123", owner="user-123"))


class TestAuthorizeCommentDeletion:
    """Tests for the comment deletion chain."""

    @pytest.mark.asyncio
    async def test_owner_is_authorized(self, unit_env):
        await _seed(unit_env)
        service = await unit_env.get(DeleteAuthorizationService)

        await service.authorize_comment_deletion(
            ThreadId("thread-123"), CommentId("comment-123"), UserId("user-123")
        )

    @pytest.mark.asyncio
    async def test_unknown_thread(self, unit_env):
        await _seed(unit_env)
        service = await unit_env.get(DeleteAuthorizationService)

        with pytest.raises(NotFoundError) as exc_info:
            await service.authorize_comment_deletion(
                ThreadId("thread-xxx"), CommentId("comment-123"), UserId("user-123")
            )

        assert exc_info.value.resource == "thread"

    @pytest.mark.asyncio
    async def test_comment_in_other_thread(self, unit_env):
        await _seed(unit_env)
        service = await unit_env.get(DeleteAuthorizationService)

        with pytest.raises(NotFoundError) as exc_info:
            await service.authorize_comment_deletion(
                ThreadId("thread-456"), CommentId("comment-123"), UserId("user-123")
            )

        assert exc_info.value.resource == "comment"

    @pytest.mark.asyncio
    async def test_non_owner_is_forbidden(self, unit_env):
        await _seed(unit_env)
        service = await unit_env.get(DeleteAuthorizationService)

        with pytest.raises(ForbiddenError):
            await service.authorize_comment_deletion(
                ThreadId("thread-123"), CommentId("comment-123"), UserId("user-456")
            )

    @pytest.mark.asyncio
    async def test_missing_comment_is_not_found_even_for_non_owner(self, unit_env):
        """A missing target yields NotFound, never Forbidden."""
        await _seed(unit_env)
        service = await unit_env.get(DeleteAuthorizationService)

        with pytest.raises(NotFoundError):
            await service.authorize_comment_deletion(
                ThreadId("thread-123"), CommentId("comment-xxx"), UserId("user-456")
            )

    @pytest.mark.asyncio
    async def test_deleted_comment_is_not_found(self, unit_env):
        await _seed(unit_env)
        comments = await unit_env.get(CommentRepository)
        await comments.soft_delete(CommentId("comment-123"))
        service = await unit_env.get(DeleteAuthorizationService)

        with pytest.raises(NotFoundError):
            await service.authorize_comment_deletion(
                ThreadId("thread-123"), CommentId("comment-123"), UserId("user-123")
            )

    @pytest.mark.asyncio
    async def test_chain_stops_at_first_failure(self):
        """Later checks are never issued once an earlier one fails."""
        thread_repository = AsyncMock(spec=ThreadRepository)
        comment_repository = AsyncMock(spec=CommentRepository)
        reply_repository = AsyncMock(spec=ReplyRepository)
        thread_repository.verify_exists.side_effect = NotFoundError(
            "thread", "thread-xxx"
        )
        service = DeleteAuthorizationService(
            thread_repository=thread_repository,
            comment_repository=comment_repository,
            reply_repository=reply_repository,
        )

        with pytest.raises(NotFoundError):
            await service.authorize_comment_deletion(
                ThreadId("thread-xxx"), CommentId("comment-123"), UserId("user-123")
            )

        comment_repository.verify_exists_in_thread.assert_not_awaited()
        comment_repository.verify_owner.assert_not_awaited()


class TestAuthorizeReplyDeletion:
    """Tests for the reply deletion chain."""

    @pytest.mark.asyncio
    async def test_owner_is_authorized(self, unit_env):
        await _seed(unit_env)
        service = await unit_env.get(DeleteAuthorizationService)

        await service.authorize_reply_deletion(
            ThreadId("thread-123"),
            CommentId("comment-123"),
            ReplyId("reply-123"),
            UserId("user-123"),
        )

    @pytest.mark.asyncio
    async def test_unknown_thread_fails_on_comment_lookup(self, unit_env):
        await _seed(unit_env)
        service = await unit_env.get(DeleteAuthorizationService)

        with pytest.raises(NotFoundError) as exc_info:
            await service.authorize_reply_deletion(
                ThreadId("thread-xxx"),
                CommentId("comment-123"),
                ReplyId("reply-123"),
                UserId("user-123"),
            )

        assert exc_info.value.resource == "comment"

    @pytest.mark.asyncio
    async def test_reply_on_other_comment(self, unit_env):
        await _seed(unit_env)
        comments = await unit_env.get(CommentRepository)
        comments.put(comment_row("comment-456", "thread-123"))
        service = await unit_env.get(DeleteAuthorizationService)

        with pytest.raises(NotFoundError) as exc_info:
            await service.authorize_reply_deletion(
                ThreadId("thread-123"),
                CommentId("comment-456"),
                ReplyId("reply-123"),
                UserId("user-123"),
            )

        assert exc_info.value.resource == "reply"

    @pytest.mark.asyncio
    async def test_non_owner_is_forbidden(self, unit_env):
        await _seed(unit_env)
        service = await unit_env.get(DeleteAuthorizationService)

        with pytest.raises(ForbiddenError):
            await service.authorize_reply_deletion(
                ThreadId("thread-123"),
                CommentId("comment-123"),
                ReplyId("reply-123"),
                UserId("user-456"),
            )

    @pytest.mark.asyncio
    async def test_ownership_checked_last(self):
        reply_repository = AsyncMock(spec=ReplyRepository)
        reply_repository.verify_exists_in_comment.side_effect = NotFoundError(
            "reply", "reply-xxx"
        )
        service = DeleteAuthorizationService(
            thread_repository=AsyncMock(spec=ThreadRepository),
            comment_repository=AsyncMock(spec=CommentRepository),
            reply_repository=reply_repository,
        )

        with pytest.raises(NotFoundError):
            await service.authorize_reply_deletion(
                ThreadId("thread-123"),
                CommentId("comment-123"),
                ReplyId("reply-xxx"),
                UserId("user-456"),
            )

        reply_repository.verify_owner.assert_not_awaited()
