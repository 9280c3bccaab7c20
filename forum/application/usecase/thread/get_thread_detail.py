"""Get thread detail use case."""

from datetime import datetime

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.model import DetailComment, DetailReply, DetailThread
from forum.domain.service import ThreadDetailService
from forum.domain.value import ThreadId


class ReplyItem(BaseModel):
    """Reply item in response."""

    id: str
    username: str
    date: datetime
    content: str

    @classmethod
    def from_domain(cls, reply: DetailReply) -> "ReplyItem":
        return cls(
            id=reply.id,
            username=reply.username,
            date=reply.date,
            content=reply.content,
        )


class CommentItem(BaseModel):
    """Comment item in response, with its replies."""

    id: str
    username: str
    date: datetime
    content: str
    replies: list[ReplyItem]

    @classmethod
    def from_domain(cls, comment: DetailComment) -> "CommentItem":
        return cls(
            id=comment.id,
            username=comment.username,
            date=comment.date,
            content=comment.content,
            replies=[ReplyItem.from_domain(reply) for reply in comment.replies],
        )


class ThreadItem(BaseModel):
    """Thread item in response, with its comments."""

    id: str
    title: str
    body: str
    date: datetime
    username: str
    comments: list[CommentItem]

    @classmethod
    def from_domain(cls, thread: DetailThread) -> "ThreadItem":
        """Convert a domain DetailThread to its response model.

        Args:
            thread: Domain thread detail

        Returns:
            Response model with comments and replies converted
        """
        return cls(
            id=thread.id,
            title=thread.title,
            body=thread.body,
            date=thread.date,
            username=thread.username,
            comments=[CommentItem.from_domain(c) for c in thread.comments],
        )


class GetThreadDetailRequest(BaseModel):
    """Get thread detail request."""

    thread_id: str


class GetThreadDetailResponse(BaseModel):
    """Get thread detail response."""

    thread: ThreadItem


class GetThreadDetailUseCase(BaseUseCase):
    """Use case for reading a thread with all comments and replies."""

    def __init__(self, thread_detail_service: ThreadDetailService) -> None:
        """Initialize get thread detail use case.

        Args:
            thread_detail_service: Thread detail domain service
        """
        self.thread_detail_service = thread_detail_service

    async def execute(self, request: GetThreadDetailRequest) -> GetThreadDetailResponse:
        """Execute get thread detail flow.

        Args:
            request: Get thread detail request

        Returns:
            The thread with comments and replies, oldest first, deleted
            content masked

        Raises:
            NotFoundError: If the thread does not exist
        """
        detail = await self.thread_detail_service.get_thread_detail(
            ThreadId(request.thread_id)
        )
        return GetThreadDetailResponse(thread=ThreadItem.from_domain(detail))
