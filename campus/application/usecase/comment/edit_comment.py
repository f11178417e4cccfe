"""Edit comment use case."""

from uuid import UUID

from pydantic import BaseModel

from campus.domain.service import CommentService, UserService
from campus.domain.value import PostId, Principal

from .get_comments import CommentItem


class EditCommentRequest(BaseModel):
    """Edit comment request."""

    post_id: str  # UUID string
    text: str
    principal: Principal | None = None


class EditCommentUseCase:
    """Use case for editing the caller's own comment on a post."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: EditCommentRequest) -> CommentItem:
        """Execute edit comment flow.

        The comment is addressed by (post, caller), so callers can only
        ever edit their own comment.

        Raises:
            UnauthenticatedError: If the caller is anonymous
            UserBannedError: If the caller is banned
            NotFoundError: If the caller has no comment on the post
        """
        user = await self.user_service.require_active_user(
            request.principal, "edit your comment"
        )
        comment = await self.comment_service.edit_comment(
            PostId(UUID(request.post_id)), user.id, request.text
        )
        return CommentItem.from_comment(comment)
