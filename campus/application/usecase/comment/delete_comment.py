"""Delete comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from campus.domain.error import NotAuthorizedError
from campus.domain.service import CommentService, UserService
from campus.domain.value import PostId, Principal, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    post_id: str  # UUID string
    author_id: str
    principal: Principal | None = None


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    post_id: str
    author_id: str
    deleted: bool


class DeleteCommentUseCase:
    """Use case for deleting a comment (its author or an administrator)."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Args:
            request: Delete comment request

        Returns:
            Delete comment response

        Raises:
            UnauthenticatedError: If the caller is anonymous
            NotAuthorizedError: If the caller is neither the author nor an administrator
            NotFoundError: If the author has no comment on the post
        """
        user = await self.user_service.require_active_user(
            request.principal, "delete a comment"
        )
        if request.author_id != user.id and not user.is_admin:
            logfire.warn(
                "Unauthorized comment deletion attempt",
                post_id=request.post_id,
                author_id=request.author_id,
                user_id=user.id,
            )
            raise NotAuthorizedError("You can only delete your own comment")

        await self.comment_service.delete_comment(
            PostId(UUID(request.post_id)), UserId(request.author_id)
        )
        return DeleteCommentResponse(
            post_id=request.post_id, author_id=request.author_id, deleted=True
        )
