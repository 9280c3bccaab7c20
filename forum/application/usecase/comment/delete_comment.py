"""Delete comment use case."""

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.service import CommentService, DeleteAuthorizationService
from forum.domain.value import CommentId, ThreadId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    thread_id: str
    comment_id: str
    owner: str  # User ID from authenticated user (must be author)


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    status: str


class DeleteCommentUseCase(BaseUseCase):
    """Use case for soft-deleting a comment."""

    def __init__(
        self,
        authorization_service: DeleteAuthorizationService,
        comment_service: CommentService,
    ) -> None:
        """Initialize delete comment use case.

        Args:
            authorization_service: Delete authorization domain service
            comment_service: Comment domain service
        """
        self.authorization_service = authorization_service
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Args:
            request: Delete comment request

        Returns:
            Delete comment response

        Raises:
            NotFoundError: If the thread or comment does not exist, or the
                comment is already deleted
            ForbiddenError: If the user doesn't own the comment
        """
        comment_id = CommentId(request.comment_id)

        await self.authorization_service.authorize_comment_deletion(
            thread_id=ThreadId(request.thread_id),
            comment_id=comment_id,
            actor=UserId(request.owner),
        )
        await self.comment_service.delete_comment(comment_id)

        return DeleteCommentResponse(status="success")
