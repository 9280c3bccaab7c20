"""Integration tests for CommentRepository."""

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.error import ForbiddenError, NotFoundError
from forum.domain.model import NewComment
from forum.domain.repository import CommentRepository
from forum.domain.value import CommentId, ThreadId, UserId
from forum.persistence.tables import comments_table
from tests.conftest import at
from tests.harness import create_env_fixture
from tests.integration.seed import seed_comment, seed_thread, seed_user

pytestmark = pytest.mark.integration

integration_env = create_env_fixture(unmock={"persistence"})


async def _thread(integration_env):
    session = await integration_env.get(AsyncSession)
    owner = await seed_user(session)
    thread_id = await seed_thread(session, owner)
    return session, owner, thread_id


class TestCommentRepositoryIntegration:
    """Integration tests for PostgresCommentRepository."""

    @pytest.mark.asyncio
    async def test_list_orders_by_date(self, integration_env):
        # Arrange
        session, owner, thread_id = await _thread(integration_env)
        comment_repo = await integration_env.get(CommentRepository)
        late = await seed_comment(session, thread_id, owner, at(30))
        early = await seed_comment(session, thread_id, owner, at(10))
        middle = await seed_comment(session, thread_id, owner, at(20))

        # Act
        rows = await comment_repo.list_by_thread(ThreadId(thread_id))

        # Assert
        assert [row["id"] for row in rows] == [early, middle, late]
        assert set(rows[0]) == {"id", "username", "date", "content", "is_delete"}

    @pytest.mark.asyncio
    async def test_equal_dates_keep_insertion_order(self, integration_env):
        """Comments added in one transaction share NOW() and keep their order."""
        # Arrange
        session, owner, thread_id = await _thread(integration_env)
        comment_repo = await integration_env.get(CommentRepository)
        added = [
            await comment_repo.add(
                NewComment(
                    thread_id=thread_id,
                    content=f"comment {i}",
                    owner=owner,
                    username="dicoding",
                )
            )
            for i in range(4)
        ]

        # Act
        rows = await comment_repo.list_by_thread(ThreadId(thread_id))

        # Assert
        assert len({row["date"] for row in rows}) == 1
        assert [row["id"] for row in rows] == [a.id for a in added]

    @pytest.mark.asyncio
    async def test_deleted_comment_is_listed_but_not_live(self, integration_env):
        # Arrange
        session, owner, thread_id = await _thread(integration_env)
        comment_repo = await integration_env.get(CommentRepository)
        comment_id = await seed_comment(session, thread_id, owner, at(1))

        # Act
        await comment_repo.soft_delete(CommentId(comment_id))

        # Assert
        with pytest.raises(NotFoundError):
            await comment_repo.verify_exists_in_thread(
                CommentId(comment_id), ThreadId(thread_id)
            )
        rows = await comment_repo.list_by_thread(ThreadId(thread_id))
        assert [row["id"] for row in rows] == [comment_id]
        assert rows[0]["is_delete"] is True
        assert rows[0]["content"] == "sebuah comment"

    @pytest.mark.asyncio
    async def test_soft_delete_keeps_stored_content(self, integration_env):
        # Arrange
        session, owner, thread_id = await _thread(integration_env)
        comment_repo = await integration_env.get(CommentRepository)
        comment_id = await seed_comment(session, thread_id, owner, at(1))

        # Act
        await comment_repo.soft_delete(CommentId(comment_id))

        # Assert
        result = await session.execute(
            select(comments_table.c.content, comments_table.c.is_delete).where(
                comments_table.c.id == comment_id
            )
        )
        assert tuple(result.one()) == ("sebuah comment", True)

    @pytest.mark.asyncio
    async def test_comment_scoped_to_its_thread(self, integration_env):
        # Arrange
        session, owner, thread_id = await _thread(integration_env)
        other_thread = await seed_thread(session, owner)
        comment_repo = await integration_env.get(CommentRepository)
        comment_id = await seed_comment(session, thread_id, owner, at(1))

        # Act & Assert
        await comment_repo.verify_exists_in_thread(
            CommentId(comment_id), ThreadId(thread_id)
        )
        with pytest.raises(NotFoundError):
            await comment_repo.verify_exists_in_thread(
                CommentId(comment_id), ThreadId(other_thread)
            )

    @pytest.mark.asyncio
    async def test_verify_owner(self, integration_env):
        # Arrange
        session, owner, thread_id = await _thread(integration_env)
        comment_repo = await integration_env.get(CommentRepository)
        comment_id = await seed_comment(session, thread_id, owner, at(1))

        # Act & Assert
        await comment_repo.verify_owner(CommentId(comment_id), UserId(owner))
        with pytest.raises(ForbiddenError):
            await comment_repo.verify_owner(CommentId(comment_id), UserId("user-other"))
        with pytest.raises(NotFoundError):
            await comment_repo.verify_owner(
                CommentId("comment-does-not-exist"), UserId(owner)
            )
