"""Post comment use case."""

from uuid import UUID

from pydantic import BaseModel

from campus.domain.service import CommentService, PostService, UserService
from campus.domain.value import AuthorSnapshot, PostId, Principal

from .get_comments import CommentItem


class PostCommentRequest(BaseModel):
    """Post comment request."""

    post_id: str  # UUID string
    text: str
    principal: Principal | None = None


class PostCommentUseCase:
    """Use case for commenting on a post."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
    ) -> None:
        """Initialize post comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: PostCommentRequest) -> CommentItem:
        """Execute post comment flow.

        Steps:
        1. Resolve the author (rejects anonymous and banned callers)
        2. Check the post is visible to the author
        3. Create the comment and bump the post's comment count atomically

        Args:
            request: Post comment request

        Returns:
            The created comment

        Raises:
            UnauthenticatedError: If the caller is anonymous
            UserBannedError: If the caller is banned
            NotFoundError: If the post does not exist or is hidden from the caller
            DuplicateCommentError: If the caller already commented on the post
        """
        user = await self.user_service.require_active_user(
            request.principal, "comment"
        )
        post_id = PostId(UUID(request.post_id))
        await self.post_service.get_visible_post(post_id, user)

        comment = await self.comment_service.post_comment(
            post_id=post_id,
            author=AuthorSnapshot(
                id=user.id, display_name=user.display_name, avatar_url=user.avatar_url
            ),
            text=request.text,
        )
        return CommentItem.from_comment(comment)
