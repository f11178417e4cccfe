"""Application layer DI providers."""

from dishka import Scope, provide

from campus.application.usecase.comment import (
    DeleteCommentUseCase,
    EditCommentUseCase,
    GetCommentsUseCase,
    GetCommentUseCase,
    PostCommentUseCase,
)
from campus.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    ListSuspendedPostsUseCase,
    UpdatePostUseCase,
)
from campus.application.usecase.report import (
    DismissReportUseCase,
    FileReportUseCase,
    ListReportsUseCase,
    UpdateReportStatusUseCase,
)
from campus.application.usecase.user import (
    BanUserUseCase,
    FindUserByEmailUseCase,
    GetCurrentUserUseCase,
    GetUserProfileUseCase,
)
from campus.application.usecase.vote import CastVoteUseCase, GetVoteUseCase
from campus.domain.service import (
    CommentService,
    PostService,
    ReportService,
    UserService,
    VoteService,
)
from campus.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_ban_user_use_case(self, user_service: UserService) -> BanUserUseCase:
        """Provide ban user use case."""
        return BanUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_get_user_profile_use_case(
        self,
        user_service: UserService,
        post_service: PostService,
        comment_service: CommentService,
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(
            user_service=user_service,
            post_service=post_service,
            comment_service=comment_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_find_user_by_email_use_case(
        self,
        user_service: UserService,
        get_user_profile_use_case: GetUserProfileUseCase,
    ) -> FindUserByEmailUseCase:
        """Provide find user by email use case."""
        return FindUserByEmailUseCase(
            user_service=user_service,
            get_user_profile_use_case=get_user_profile_use_case,
        )

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(
        self,
        post_service: PostService,
        vote_service: VoteService,
        user_service: UserService,
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(
            post_service=post_service,
            vote_service=vote_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_post_use_case(
        self,
        post_service: PostService,
        user_service: UserService,
        vote_service: VoteService,
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(
            post_service=post_service,
            user_service=user_service,
            vote_service=vote_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_list_suspended_posts_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> ListSuspendedPostsUseCase:
        """Provide list suspended posts use case."""
        return ListSuspendedPostsUseCase(
            post_service=post_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service, user_service=user_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_post_comment_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
    ) -> PostCommentUseCase:
        """Provide post comment use case."""
        return PostCommentUseCase(
            comment_service=comment_service,
            post_service=post_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_edit_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> EditCommentUseCase:
        """Provide edit comment use case."""
        return EditCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        vote_service: VoteService,
        user_service: UserService,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service,
            post_service=post_service,
            vote_service=vote_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comment_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        vote_service: VoteService,
        user_service: UserService,
    ) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(
            comment_service=comment_service,
            post_service=post_service,
            vote_service=vote_service,
            user_service=user_service,
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self,
        vote_service: VoteService,
        post_service: PostService,
        user_service: UserService,
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(
            vote_service=vote_service,
            post_service=post_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_vote_use_case(self, vote_service: VoteService) -> GetVoteUseCase:
        """Provide get vote use case."""
        return GetVoteUseCase(vote_service=vote_service)

    # Report use cases
    @provide(scope=Scope.REQUEST)
    def get_file_report_use_case(
        self, report_service: ReportService, user_service: UserService
    ) -> FileReportUseCase:
        """Provide file report use case."""
        return FileReportUseCase(
            report_service=report_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_reports_use_case(
        self, report_service: ReportService, user_service: UserService
    ) -> ListReportsUseCase:
        """Provide list reports use case."""
        return ListReportsUseCase(
            report_service=report_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_dismiss_report_use_case(
        self, report_service: ReportService, user_service: UserService
    ) -> DismissReportUseCase:
        """Provide dismiss report use case."""
        return DismissReportUseCase(
            report_service=report_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_report_status_use_case(
        self, report_service: ReportService, user_service: UserService
    ) -> UpdateReportStatusUseCase:
        """Provide update report status use case."""
        return UpdateReportStatusUseCase(
            report_service=report_service, user_service=user_service
        )
