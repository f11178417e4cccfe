"""Get post use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from campus.domain.model import Post
from campus.domain.service import PostService, UserService, VoteService
from campus.domain.value import (
    AuthorSnapshot,
    ContentType,
    PostCategory,
    PostId,
    Principal,
    VoteType,
)


class PostItem(BaseModel):
    """Post item in responses."""

    post_id: str
    author: AuthorSnapshot
    title: str
    text: str | None
    image_url: str | None
    category: PostCategory
    created_at: datetime
    upvotes: int
    downvotes: int
    comments_count: int
    report_count: int
    is_suspended: bool
    user_vote: VoteType | None = None

    @classmethod
    def from_post(cls, post: Post, user_vote: VoteType | None = None) -> "PostItem":
        """Build the response item for a post."""
        return cls(
            post_id=str(post.id),
            author=post.author,
            title=post.title,
            text=post.text,
            image_url=post.image_url,
            category=post.category,
            created_at=post.created_at,
            upvotes=post.reactions.upvotes,
            downvotes=post.reactions.downvotes,
            comments_count=post.comments_count,
            report_count=post.report_count,
            is_suspended=post.is_suspended,
            user_vote=user_vote,
        )


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str  # UUID string
    principal: Principal | None = None


class GetPostUseCase:
    """Use case for getting a single post."""

    def __init__(
        self,
        post_service: PostService,
        vote_service: VoteService,
        user_service: UserService,
    ) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            vote_service: Vote service for the caller's vote
            user_service: User service for the caller's moderator rights
        """
        self.post_service = post_service
        self.vote_service = vote_service
        self.user_service = user_service

    async def execute(self, request: GetPostRequest) -> PostItem:
        """Execute get post flow.

        Suspended posts are only visible to their author and to administrators.

        Args:
            request: Get post request

        Returns:
            The post with the caller's vote

        Raises:
            NotFoundError: If the post does not exist or is hidden from the caller
        """
        principal = request.principal
        viewer = await self.user_service.get_viewer(principal)
        post = await self.post_service.get_visible_post(
            PostId(UUID(request.post_id)), viewer
        )

        user_vote = (
            await self.vote_service.get_vote(ContentType.POST, post.id, principal.id)
            if principal
            else None
        )
        return PostItem.from_post(post, user_vote)
