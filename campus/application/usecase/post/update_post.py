"""Update post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from campus.domain.error import NotAuthorizedError, NotFoundError
from campus.domain.service import PostService, UserService, VoteService
from campus.domain.value import ContentType, PostCategory, PostId, Principal

from .get_post import PostItem


class UpdatePostRequest(BaseModel):
    """Update post request.

    Only the fields set on the request are changed; setting ``text`` or
    ``image_url`` to None clears it.
    """

    post_id: str  # UUID string
    title: str | None = Field(default=None, max_length=300)
    category: PostCategory | None = None
    text: str | None = Field(default=None, max_length=5000)
    image_url: str | None = None
    principal: Principal | None = None


class UpdatePostUseCase:
    """Use case for editing a post's content (author only)."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        vote_service: VoteService,
    ) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
            vote_service: Vote service for the caller's vote
        """
        self.post_service = post_service
        self.user_service = user_service
        self.vote_service = vote_service

    async def execute(self, request: UpdatePostRequest) -> PostItem:
        """Execute update post flow.

        Steps:
        1. Resolve the editor (rejects anonymous and banned callers)
        2. Check the editor wrote the post
        3. Apply the content changes; counters are untouched

        Args:
            request: Update post request

        Returns:
            The edited post

        Raises:
            UnauthenticatedError: If the caller is anonymous
            UserBannedError: If the caller is banned
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the caller is not the author
            ValidationError: If the edit leaves the post without text and image
        """
        user = await self.user_service.require_active_user(
            request.principal, "edit a post"
        )
        post_id = PostId(UUID(request.post_id))

        post = await self.post_service.get_post_by_id(post_id)
        if post is None:
            raise NotFoundError("Post", request.post_id)

        if post.author_id != user.id:
            logfire.warn(
                "Unauthorized post edit attempt",
                post_id=request.post_id,
                user_id=user.id,
            )
            raise NotAuthorizedError("You can only edit your own posts")

        changes = request.model_dump(
            include=request.model_fields_set - {"post_id", "principal"}
        )
        updated = await self.post_service.update_post(post, changes)

        user_vote = await self.vote_service.get_vote(
            ContentType.POST, updated.id, user.id
        )
        return PostItem.from_post(updated, user_vote)
