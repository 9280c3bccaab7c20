"""Thread use cases."""

from .add_thread import AddThreadRequest, AddThreadResponse, AddThreadUseCase
from .get_thread_detail import (
    GetThreadDetailRequest,
    GetThreadDetailResponse,
    GetThreadDetailUseCase,
)

__all__ = [
    "AddThreadRequest",
    "AddThreadResponse",
    "AddThreadUseCase",
    "GetThreadDetailRequest",
    "GetThreadDetailResponse",
    "GetThreadDetailUseCase",
]
