"""Add comment use case."""

from typing import Any

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.model import NewComment
from forum.domain.service import CommentService, ThreadService
from forum.domain.value import ThreadId


class AddCommentRequest(BaseModel):
    """Add comment request."""

    thread_id: str
    payload: dict[str, Any]  # Raw request body, validated by NewComment
    owner: str  # User ID from authenticated user
    username: str  # Display name from authenticated user


class AddCommentResponse(BaseModel):
    """Add comment response."""

    id: str
    content: str
    owner: str


class AddCommentUseCase(BaseUseCase):
    """Use case for commenting on a thread."""

    def __init__(
        self,
        thread_service: ThreadService,
        comment_service: CommentService,
    ) -> None:
        """Initialize add comment use case.

        Args:
            thread_service: Thread domain service
            comment_service: Comment domain service
        """
        self.thread_service = thread_service
        self.comment_service = comment_service

    async def execute(self, request: AddCommentRequest) -> AddCommentResponse:
        """Execute add comment flow.

        Steps:
        1. Validate the payload
        2. Verify the thread exists
        3. Create the comment

        Args:
            request: Add comment request

        Returns:
            Created comment

        Raises:
            ValidationError: If content is missing or not a string
            NotFoundError: If the thread does not exist
        """
        new_comment = NewComment.create(
            request.payload,
            thread_id=request.thread_id,
            owner=request.owner,
            username=request.username,
        )

        await self.thread_service.verify_thread_exists(ThreadId(request.thread_id))

        added = await self.comment_service.add_comment(new_comment)

        return AddCommentResponse(id=added.id, content=added.content, owner=added.owner)
