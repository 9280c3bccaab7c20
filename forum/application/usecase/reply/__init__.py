"""Reply use cases."""

from .add_reply import AddReplyRequest, AddReplyResponse, AddReplyUseCase
from .delete_reply import DeleteReplyRequest, DeleteReplyResponse, DeleteReplyUseCase

__all__ = [
    "AddReplyRequest",
    "AddReplyResponse",
    "AddReplyUseCase",
    "DeleteReplyRequest",
    "DeleteReplyResponse",
    "DeleteReplyUseCase",
]
