"""Delete reply use case."""

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.service import DeleteAuthorizationService, ReplyService
from forum.domain.value import CommentId, ReplyId, ThreadId, UserId


class DeleteReplyRequest(BaseModel):
    """Delete reply request."""

    thread_id: str
    comment_id: str
    reply_id: str
    owner: str  # User ID from authenticated user (must be author)


class DeleteReplyResponse(BaseModel):
    """Delete reply response."""

    status: str


class DeleteReplyUseCase(BaseUseCase):
    """Use case for soft-deleting a reply."""

    def __init__(
        self,
        authorization_service: DeleteAuthorizationService,
        reply_service: ReplyService,
    ) -> None:
        """Initialize delete reply use case.

        Args:
            authorization_service: Delete authorization domain service
            reply_service: Reply domain service
        """
        self.authorization_service = authorization_service
        self.reply_service = reply_service

    async def execute(self, request: DeleteReplyRequest) -> DeleteReplyResponse:
        """Execute delete reply flow.

        Args:
            request: Delete reply request

        Returns:
            Delete reply response

        Raises:
            NotFoundError: If the comment or reply does not exist in its
                scope, or the reply is already deleted
            ForbiddenError: If the user doesn't own the reply
        """
        reply_id = ReplyId(request.reply_id)

        await self.authorization_service.authorize_reply_deletion(
            thread_id=ThreadId(request.thread_id),
            comment_id=CommentId(request.comment_id),
            reply_id=reply_id,
            actor=UserId(request.owner),
        )
        await self.reply_service.delete_reply(reply_id)

        return DeleteReplyResponse(status="success")
