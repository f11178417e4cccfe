"""Delete post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from campus.domain.error import NotAuthorizedError, NotFoundError
from campus.domain.service import PostService, UserService
from campus.domain.value import PostId, Principal


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str  # UUID string
    principal: Principal | None = None


class DeletePostResponse(BaseModel):
    """Delete post response."""

    post_id: str
    deleted: bool


class DeletePostUseCase:
    """Use case for deleting a post (author or administrator)."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Deleting a post removes its comments and votes. Reports filed
        against it stay in the moderation list.

        Args:
            request: Delete post request

        Returns:
            Delete post response

        Raises:
            UnauthenticatedError: If the caller is anonymous
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the caller is neither the author nor an administrator
        """
        user = await self.user_service.require_active_user(
            request.principal, "delete a post"
        )
        post_id = PostId(UUID(request.post_id))

        post = await self.post_service.get_post_by_id(post_id)
        if post is None:
            raise NotFoundError("Post", request.post_id)

        if post.author_id != user.id and not user.is_admin:
            logfire.warn(
                "Unauthorized post deletion attempt",
                post_id=request.post_id,
                user_id=user.id,
            )
            raise NotAuthorizedError("You can only delete your own posts")

        if not await self.post_service.delete_post(post_id):
            raise NotFoundError("Post", request.post_id)

        return DeletePostResponse(post_id=request.post_id, deleted=True)
