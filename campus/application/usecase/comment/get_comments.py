"""Get comments use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from campus.domain.model import Comment
from campus.domain.service import (
    CommentService,
    PostService,
    UserService,
    VoteService,
)
from campus.domain.value import AuthorSnapshot, PostId, Principal, VoteType


class CommentItem(BaseModel):
    """Comment item in responses."""

    comment_id: str
    post_id: str
    author: AuthorSnapshot
    text: str
    created_at: datetime
    edited_at: datetime | None
    upvotes: int
    downvotes: int
    user_vote: VoteType | None = None

    @classmethod
    def from_comment(
        cls, comment: Comment, user_vote: VoteType | None = None
    ) -> "CommentItem":
        """Build the response item for a comment."""
        return cls(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            author=comment.author,
            text=comment.text,
            created_at=comment.created_at,
            edited_at=comment.edited_at,
            upvotes=comment.reactions.upvotes,
            downvotes=comment.reactions.downvotes,
            user_vote=user_vote,
        )


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: str  # UUID string
    principal: Principal | None = None


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    post_id: str
    comments: list[CommentItem]
    total: int


class GetCommentsUseCase:
    """Use case for getting all comments on a post, oldest first."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        vote_service: VoteService,
        user_service: UserService,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            vote_service: Vote service for the caller's votes
            user_service: User service for the caller's moderator rights
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.vote_service = vote_service
        self.user_service = user_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Args:
            request: Get comments request with post ID and optional principal

        Returns:
            Comments with the caller's vote on each

        Raises:
            NotFoundError: If the post does not exist or is hidden from the caller
        """
        post_id = PostId(UUID(request.post_id))
        viewer = await self.user_service.get_viewer(request.principal)
        await self.post_service.get_visible_post(post_id, viewer)

        comments = await self.comment_service.get_comments_for_post(post_id)

        # Batch query for the caller's votes (if authenticated)
        user_votes: dict[str, VoteType] = {}
        if request.principal and comments:
            votes_map = await self.vote_service.get_votes_for_comments(
                voter_id=request.principal.id,
                comment_ids=[comment.id for comment in comments],
            )
            user_votes = {str(cid): vote for cid, vote in votes_map.items()}

        items = [
            CommentItem.from_comment(comment, user_votes.get(str(comment.id)))
            for comment in comments
        ]
        return GetCommentsResponse(
            post_id=request.post_id, comments=items, total=len(items)
        )
