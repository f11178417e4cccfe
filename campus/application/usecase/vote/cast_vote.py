"""Cast vote use case."""

from uuid import UUID

from pydantic import BaseModel

from campus.domain.service import PostService, UserService, VoteService
from campus.domain.value import (
    ContentType,
    PostId,
    Principal,
    UserId,
    VoteType,
    comment_id_for,
)


def votable_for(post_id: str, comment_author_id: str | None) -> tuple[ContentType, UUID]:
    """Address a post, or one author's comment on it, as a votable item."""
    post_uuid = PostId(UUID(post_id))
    if comment_author_id is None:
        return ContentType.POST, post_uuid
    return ContentType.COMMENT, comment_id_for(post_uuid, UserId(comment_author_id))


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    post_id: str  # UUID string
    comment_author_id: str | None = None  # Set when voting on a comment
    vote_type: VoteType
    principal: Principal | None = None


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    votable_type: ContentType
    votable_id: str
    upvotes: int
    downvotes: int
    user_vote: VoteType | None  # None when the vote was toggled off


class CastVoteUseCase:
    """Use case for voting on a post or comment."""

    def __init__(
        self,
        vote_service: VoteService,
        post_service: PostService,
        user_service: UserService,
    ) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
            post_service: Post domain service
            user_service: User domain service
        """
        self.vote_service = vote_service
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Casting the polarity the caller already holds withdraws the vote;
        casting the other polarity flips it.

        Args:
            request: Cast vote request

        Returns:
            The item's tally and the caller's resulting vote

        Raises:
            UnauthenticatedError: If the caller is anonymous
            UserBannedError: If the caller is banned
            NotFoundError: If the item does not exist or its post is hidden from the caller
        """
        user = await self.user_service.require_active_user(request.principal, "vote")
        await self.post_service.get_visible_post(PostId(UUID(request.post_id)), user)
        votable_type, votable_id = votable_for(
            request.post_id, request.comment_author_id
        )

        reactions = await self.vote_service.cast_vote(
            votable_type, votable_id, user.id, request.vote_type
        )
        current = await self.vote_service.get_vote(votable_type, votable_id, user.id)

        return CastVoteResponse(
            votable_type=votable_type,
            votable_id=str(votable_id),
            upvotes=reactions.upvotes,
            downvotes=reactions.downvotes,
            user_vote=current,
        )
