"""Comment use cases."""

from .add_comment import AddCommentRequest, AddCommentResponse, AddCommentUseCase
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)

__all__ = [
    "AddCommentRequest",
    "AddCommentResponse",
    "AddCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
]
