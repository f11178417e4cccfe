"""Get vote use case."""

from pydantic import BaseModel

from campus.domain.service import VoteService
from campus.domain.value import ContentType, Principal, VoteType

from .cast_vote import votable_for


class GetVoteRequest(BaseModel):
    """Get vote request."""

    post_id: str  # UUID string
    comment_author_id: str | None = None  # Set when asking about a comment
    principal: Principal | None = None


class GetVoteResponse(BaseModel):
    """Get vote response."""

    votable_type: ContentType
    votable_id: str
    vote_type: VoteType | None


class GetVoteUseCase:
    """Use case for reading the caller's vote on a post or comment."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: GetVoteRequest) -> GetVoteResponse:
        """Execute get vote flow; anonymous callers have no vote."""
        votable_type, votable_id = votable_for(
            request.post_id, request.comment_author_id
        )
        vote_type = (
            await self.vote_service.get_vote(
                votable_type, votable_id, request.principal.id
            )
            if request.principal
            else None
        )
        return GetVoteResponse(
            votable_type=votable_type,
            votable_id=str(votable_id),
            vote_type=vote_type,
        )
