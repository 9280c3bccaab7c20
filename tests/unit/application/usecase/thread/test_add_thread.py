"""Unit tests for AddThreadUseCase."""

import pytest

from forum.application.usecase.thread import AddThreadRequest, AddThreadUseCase
from forum.domain.error import ValidationError, ValidationErrorKind
from forum.domain.repository import ThreadRepository
from forum.domain.value import ThreadId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestAddThreadUseCase:
    """Tests for AddThreadUseCase."""

    @pytest.mark.asyncio
    async def test_add_thread(self, unit_env):
        use_case = await unit_env.get(AddThreadUseCase)
        thread_repo = await unit_env.get(ThreadRepository)

        result = await use_case.execute(
            AddThreadRequest(
                payload={"title": "sebuah thread", "body": "sebuah body thread"},
                owner="user-123",
                username="dicoding",
            )
        )

        assert result.id.startswith("thread-")
        assert result.title == "sebuah thread"
        assert result.owner == "user-123"

        stored = await thread_repo.get_by_id(ThreadId(result.id))
        assert stored["username"] == "dicoding"
        assert stored["body"] == "sebuah body thread"

    @pytest.mark.asyncio
    async def test_add_thread_rejects_missing_body(self, unit_env):
        use_case = await unit_env.get(AddThreadUseCase)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                AddThreadRequest(
                    payload={"title": "sebuah thread"},
                    owner="user-123",
                    username="dicoding",
                )
            )

        assert exc_info.value.kind == ValidationErrorKind.MISSING_PROPERTY
