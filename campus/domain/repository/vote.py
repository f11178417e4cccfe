"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
from uuid import UUID

from campus.domain.model.vote import Vote
from campus.domain.value import ContentType, UserId, VoteType


class VoteRepository(ABC):
    """Repository for Vote entity.

    Votes are keyed by (votable_type, votable_id, voter_id).
    """

    @abstractmethod
    async def find(
        self,
        votable_type: ContentType,
        votable_id: UUID,
        voter_id: UserId,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item.

        Args:
            votable_type: Type of item (post or comment)
            votable_id: ID of the item
            voter_id: The voter's user ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_voter_and_votables(
        self,
        voter_id: UserId,
        votable_type: ContentType,
        votable_ids: Sequence[UUID],
    ) -> List[Vote]:
        """Find a user's votes on multiple items (batch query).

        Args:
            voter_id: The voter's user ID
            votable_type: Type of items (post or comment)
            votable_ids: Item IDs to check

        Returns:
            List of votes by the user on the specified items
        """
        pass

    @abstractmethod
    async def create(self, vote: Vote) -> Vote:
        """Insert a new vote.

        Args:
            vote: The vote to insert

        Returns:
            The saved vote

        Raises:
            ConcurrentUpdateError: If the same voter's vote was inserted concurrently
        """
        pass

    @abstractmethod
    async def update_type(self, vote: Vote, vote_type: VoteType) -> Vote:
        """Flip a vote's polarity.

        Args:
            vote: The existing vote
            vote_type: New polarity

        Returns:
            The updated vote

        Raises:
            ConcurrentUpdateError: If the vote no longer exists
        """
        pass

    @abstractmethod
    async def delete(
        self,
        votable_type: ContentType,
        votable_id: UUID,
        voter_id: UserId,
    ) -> bool:
        """Delete a vote.

        Args:
            votable_type: Type of item (post or comment)
            votable_id: ID of the item
            voter_id: The voter's user ID

        Returns:
            True if a vote was deleted, False if no vote existed
        """
        pass
