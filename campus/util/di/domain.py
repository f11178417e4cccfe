"""Domain layer DI providers."""

from dishka import Scope, provide

from campus.config import AuthSettings, ModerationSettings
from campus.domain.repository import (
    CommentRepository,
    PostRepository,
    ReportRepository,
    TransactionManager,
    UserRepository,
    VoteRepository,
)
from campus.domain.service import (
    CommentService,
    JWTService,
    PostService,
    ReportService,
    UserService,
    VoteService,
)
from campus.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        moderation_settings: ModerationSettings,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            moderation_settings=moderation_settings,
        )

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        transaction: TransactionManager,
        moderation_settings: ModerationSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            post_repository=post_repository,
            transaction=transaction,
            max_attempts=moderation_settings.conflict_retries,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        transaction: TransactionManager,
        moderation_settings: ModerationSettings,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            post_repository=post_repository,
            comment_repository=comment_repository,
            transaction=transaction,
            max_attempts=moderation_settings.conflict_retries,
        )

    @provide
    def get_report_service(
        self,
        report_repository: ReportRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        transaction: TransactionManager,
        moderation_settings: ModerationSettings,
    ) -> ReportService:
        """Provide report domain service."""
        return ReportService(
            report_repository=report_repository,
            post_repository=post_repository,
            comment_repository=comment_repository,
            transaction=transaction,
            max_attempts=moderation_settings.conflict_retries,
        )
