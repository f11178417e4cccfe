"""Create post use case."""

from pydantic import BaseModel

from campus.domain.service import PostService, UserService
from campus.domain.value import AuthorSnapshot, PostCategory, Principal

from .get_post import PostItem


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str
    category: PostCategory
    text: str | None = None
    image_url: str | None = None  # URL returned by the image host
    principal: Principal | None = None


class CreatePostUseCase:
    """Use case for creating a post."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: CreatePostRequest) -> PostItem:
        """Execute create post flow.

        Steps:
        1. Resolve the author (rejects anonymous and banned callers)
        2. Create the post with zeroed counters

        Args:
            request: Create post request

        Returns:
            The created post

        Raises:
            UnauthenticatedError: If the caller is anonymous
            UserBannedError: If the caller is banned
            ValidationError: If the post has neither text nor image
        """
        user = await self.user_service.require_active_user(
            request.principal, "create a post"
        )
        post = await self.post_service.create_post(
            author=AuthorSnapshot(
                id=user.id, display_name=user.display_name, avatar_url=user.avatar_url
            ),
            title=request.title,
            category=request.category,
            text=request.text,
            image_url=request.image_url,
        )
        return PostItem.from_post(post)
