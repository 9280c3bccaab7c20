"""Domain layer DI providers."""

from dishka import Scope, provide

from forum.config import AuthSettings
from forum.domain.repository import (
    CommentRepository,
    ReplyRepository,
    ThreadRepository,
)
from forum.domain.service import (
    CommentService,
    DeleteAuthorizationService,
    JWTService,
    ReplyService,
    ThreadDetailService,
    ThreadService,
)
from forum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider.

    Services are REQUEST-scoped so they share the request's repositories
    and database session.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_thread_service(self, thread_repository: ThreadRepository) -> ThreadService:
        """Provide thread domain service."""
        return ThreadService(thread_repository=thread_repository)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_reply_service(self, reply_repository: ReplyRepository) -> ReplyService:
        """Provide reply domain service."""
        return ReplyService(reply_repository=reply_repository)

    @provide
    def get_delete_authorization_service(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
    ) -> DeleteAuthorizationService:
        """Provide deletion authorization domain service."""
        return DeleteAuthorizationService(
            thread_repository=thread_repository,
            comment_repository=comment_repository,
            reply_repository=reply_repository,
        )

    @provide
    def get_thread_detail_service(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
    ) -> ThreadDetailService:
        """Provide thread detail domain service."""
        return ThreadDetailService(
            thread_repository=thread_repository,
            comment_repository=comment_repository,
            reply_repository=reply_repository,
        )
