"""In-memory vote repository for testing."""

from typing import Optional, Sequence
from uuid import UUID

from campus.domain.error import ConcurrentUpdateError
from campus.domain.model.vote import Vote
from campus.domain.repository.vote import VoteRepository
from campus.domain.value import ContentType, UserId, VoteType

from .store import InMemoryStore


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find(
        self,
        votable_type: ContentType,
        votable_id: UUID,
        voter_id: UserId,
    ) -> Optional[Vote]:
        """Find a voter's vote on a specific item."""
        return self.store.votes.get((votable_type, votable_id, voter_id))

    async def find_by_voter_and_votables(
        self,
        voter_id: UserId,
        votable_type: ContentType,
        votable_ids: Sequence[UUID],
    ) -> list[Vote]:
        """Find a voter's votes on multiple items (batch query)."""
        if not votable_ids:
            return []

        wanted = set(votable_ids)
        return [
            v
            for v in self.store.votes.values()
            if v.voter_id == voter_id
            and v.votable_type == votable_type
            and v.votable_id in wanted
        ]

    async def create(self, vote: Vote) -> Vote:
        """Insert a vote."""
        key = (vote.votable_type, vote.votable_id, vote.voter_id)
        if key in self.store.votes:
            raise ConcurrentUpdateError("vote", str(vote.votable_id))
        self.store.votes[key] = vote
        return vote

    async def update_type(self, vote: Vote, vote_type: VoteType) -> Vote:
        """Flip a vote's polarity."""
        updated = vote.model_copy(update={"vote_type": vote_type})
        self.store.votes[(vote.votable_type, vote.votable_id, vote.voter_id)] = updated
        return updated

    async def delete(
        self,
        votable_type: ContentType,
        votable_id: UUID,
        voter_id: UserId,
    ) -> bool:
        """Delete a voter's vote on an item."""
        return self.store.votes.pop((votable_type, votable_id, voter_id), None) is not None
