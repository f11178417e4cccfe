"""List suspended posts use case."""

from pydantic import BaseModel

from campus.domain.service import PostService, UserService
from campus.domain.value import Principal

from .get_post import PostItem


class ListSuspendedPostsRequest(BaseModel):
    """List suspended posts request."""

    principal: Principal | None = None


class ListSuspendedPostsResponse(BaseModel):
    """List suspended posts response."""

    posts: list[PostItem]
    total: int


class ListSuspendedPostsUseCase:
    """Use case for the moderators' queue of automatically suspended posts."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        self.post_service = post_service
        self.user_service = user_service

    async def execute(
        self, request: ListSuspendedPostsRequest
    ) -> ListSuspendedPostsResponse:
        """Execute list suspended posts flow.

        Raises:
            UnauthenticatedError: If the caller is anonymous
            NotAuthorizedError: If the caller is not an administrator
        """
        await self.user_service.require_admin(request.principal)
        posts = await self.post_service.list_suspended_posts()
        return ListSuspendedPostsResponse(
            posts=[PostItem.from_post(p) for p in posts], total=len(posts)
        )
