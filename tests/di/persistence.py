"""Mock persistence providers for testing."""

from dishka import Scope, provide

from forum.domain.repository import (
    CommentRepository,
    ReplyRepository,
    ThreadRepository,
)
from forum.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryReplyRepository,
    InMemoryThreadRepository,
)
from forum.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so state survives across requests served by
    one container; every test builds its own container.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_thread_repository(self) -> ThreadRepository:
        """Provide in-memory thread repository."""
        return InMemoryThreadRepository()

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_reply_repository(self) -> ReplyRepository:
        """Provide in-memory reply repository."""
        return InMemoryReplyRepository()
