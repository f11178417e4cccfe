"""Get comment use case."""

from uuid import UUID

from pydantic import BaseModel

from campus.domain.error import NotFoundError
from campus.domain.service import (
    CommentService,
    PostService,
    UserService,
    VoteService,
)
from campus.domain.value import ContentType, PostId, Principal, UserId

from .get_comments import CommentItem


class GetCommentRequest(BaseModel):
    """Get comment request."""

    post_id: str  # UUID string
    author_id: str
    principal: Principal | None = None


class GetCommentUseCase:
    """Use case for getting one author's comment on a post."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        vote_service: VoteService,
        user_service: UserService,
    ) -> None:
        self.comment_service = comment_service
        self.post_service = post_service
        self.vote_service = vote_service
        self.user_service = user_service

    async def execute(self, request: GetCommentRequest) -> CommentItem:
        """Execute get comment flow.

        Raises:
            NotFoundError: If the author has no comment on the post, or the
                post is hidden from the caller
        """
        post_id = PostId(UUID(request.post_id))
        viewer = await self.user_service.get_viewer(request.principal)
        await self.post_service.get_visible_post(post_id, viewer)

        comment = await self.comment_service.get_comment(
            post_id, UserId(request.author_id)
        )
        if comment is None:
            raise NotFoundError("Comment", f"{request.post_id}/{request.author_id}")

        user_vote = (
            await self.vote_service.get_vote(
                ContentType.COMMENT, comment.id, request.principal.id
            )
            if request.principal
            else None
        )
        return CommentItem.from_comment(comment, user_vote)
