"""List posts use case."""

from pydantic import BaseModel, Field

from campus.domain.service import PostService, UserService
from campus.domain.value import Principal

from .get_post import PostItem


class ListPostsRequest(BaseModel):
    """List posts request."""

    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)
    query: str | None = Field(default=None, max_length=200)
    principal: Principal | None = None


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostItem]
    limit: int
    offset: int


class ListPostsUseCase:
    """Use case for the newest-first post feed.

    Suspended posts are left out unless the caller is an administrator.
    """

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow."""
        viewer = await self.user_service.get_viewer(request.principal)
        include_suspended = bool(viewer and viewer.is_admin)

        posts = await self.post_service.list_posts(
            include_suspended=include_suspended,
            limit=request.limit,
            offset=request.offset,
            query=(request.query or "").strip() or None,
        )
        return ListPostsResponse(
            posts=[PostItem.from_post(p) for p in posts],
            limit=request.limit,
            offset=request.offset,
        )
