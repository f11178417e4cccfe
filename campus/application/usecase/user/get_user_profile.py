"""Get user profile use case."""

from datetime import datetime

from pydantic import BaseModel

from campus.application.usecase.comment import CommentItem
from campus.application.usecase.post import PostItem
from campus.domain.error import NotFoundError
from campus.domain.service import CommentService, PostService, UserService
from campus.domain.value import UserId


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    user_id: str
    include_suspended: bool = False  # Moderator view


class UserProfileResponse(BaseModel):
    """Public user profile with recent activity."""

    user_id: str
    display_name: str
    avatar_url: str | None
    created_at: datetime
    posts: list[PostItem]
    comments: list[CommentItem]


class GetUserProfileUseCase:
    """Use case for a user's public profile."""

    def __init__(
        self,
        user_service: UserService,
        post_service: PostService,
        comment_service: CommentService,
    ) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
            post_service: Post domain service
            comment_service: Comment domain service
        """
        self.user_service = user_service
        self.post_service = post_service
        self.comment_service = comment_service

    async def execute(self, request: GetUserProfileRequest) -> UserProfileResponse:
        """Execute get user profile flow.

        Suspended posts are left out unless the request is a moderator view.

        Raises:
            NotFoundError: If the user does not exist
        """
        user_id = UserId(request.user_id)
        user = await self.user_service.get_user_by_id(user_id)
        if user is None:
            raise NotFoundError("User", request.user_id)

        posts = await self.post_service.list_posts_by_author(user_id)
        comments = await self.comment_service.get_comments_by_author(user_id)

        return UserProfileResponse(
            user_id=user.id,
            display_name=user.display_name,
            avatar_url=user.avatar_url,
            created_at=user.created_at,
            posts=[
                PostItem.from_post(p)
                for p in posts
                if request.include_suspended or not p.is_suspended
            ],
            comments=[CommentItem.from_comment(c) for c in comments],
        )
