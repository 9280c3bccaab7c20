"""Domain services."""

from .authorization_service import DeleteAuthorizationService
from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .reply_service import ReplyService
from .thread_detail_service import ThreadDetailService
from .thread_service import ThreadService

__all__ = [
    "CommentService",
    "DeleteAuthorizationService",
    "JWTService",
    "ReplyService",
    "Service",
    "ThreadDetailService",
    "ThreadService",
]
