"""Application layer DI providers."""

from dishka import Scope, provide

from forum.application.usecase.comment import AddCommentUseCase, DeleteCommentUseCase
from forum.application.usecase.reply import AddReplyUseCase, DeleteReplyUseCase
from forum.application.usecase.thread import AddThreadUseCase, GetThreadDetailUseCase
from forum.domain.service import (
    CommentService,
    DeleteAuthorizationService,
    ReplyService,
    ThreadDetailService,
    ThreadService,
)
from forum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider - concrete, no mocks needed."""

    # Thread use cases
    @provide(scope=Scope.REQUEST)
    def get_add_thread_use_case(self, thread_service: ThreadService) -> AddThreadUseCase:
        """Provide add thread use case."""
        return AddThreadUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_get_thread_detail_use_case(
        self, thread_detail_service: ThreadDetailService
    ) -> GetThreadDetailUseCase:
        """Provide get thread detail use case."""
        return GetThreadDetailUseCase(thread_detail_service=thread_detail_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_add_comment_use_case(
        self, thread_service: ThreadService, comment_service: CommentService
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(
            thread_service=thread_service, comment_service=comment_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self,
        authorization_service: DeleteAuthorizationService,
        comment_service: CommentService,
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            authorization_service=authorization_service,
            comment_service=comment_service,
        )

    # Reply use cases
    @provide(scope=Scope.REQUEST)
    def get_add_reply_use_case(
        self, comment_service: CommentService, reply_service: ReplyService
    ) -> AddReplyUseCase:
        """Provide add reply use case."""
        return AddReplyUseCase(
            comment_service=comment_service, reply_service=reply_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_reply_use_case(
        self,
        authorization_service: DeleteAuthorizationService,
        reply_service: ReplyService,
    ) -> DeleteReplyUseCase:
        """Provide delete reply use case."""
        return DeleteReplyUseCase(
            authorization_service=authorization_service, reply_service=reply_service
        )
