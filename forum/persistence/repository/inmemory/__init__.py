"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .reply import InMemoryReplyRepository
from .thread import InMemoryThreadRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryReplyRepository",
    "InMemoryThreadRepository",
]
