"""Integration tests for ThreadRepository."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.error import NotFoundError
from forum.domain.model import NewThread
from forum.domain.repository import ThreadRepository
from forum.domain.value import ThreadId
from tests.harness import create_env_fixture
from tests.integration.seed import seed_user

pytestmark = pytest.mark.integration

integration_env = create_env_fixture(unmock={"persistence"})


class TestThreadRepositoryIntegration:
    """Integration tests for PostgresThreadRepository."""

    @pytest.mark.asyncio
    async def test_add_then_get_by_id(self, integration_env):
        # Arrange
        session = await integration_env.get(AsyncSession)
        thread_repo = await integration_env.get(ThreadRepository)
        owner = await seed_user(session)

        # Act
        added = await thread_repo.add(
            NewThread(title="sebuah thread", body="isi", owner=owner, username="dicoding")
        )
        row = await thread_repo.get_by_id(ThreadId(added.id))

        # Assert
        assert added.id.startswith("thread-")
        assert added.owner == owner
        assert set(row) == {"id", "title", "body", "date", "username"}
        assert row["body"] == "isi"
        # Stored with the database clock, timezone-aware
        assert row["date"].tzinfo is not None

    @pytest.mark.asyncio
    async def test_unknown_thread(self, integration_env):
        # Arrange
        thread_repo = await integration_env.get(ThreadRepository)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await thread_repo.verify_exists(ThreadId("thread-does-not-exist"))
        with pytest.raises(NotFoundError):
            await thread_repo.get_by_id(ThreadId("thread-does-not-exist"))
