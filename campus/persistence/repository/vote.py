"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from campus.domain.model import Vote
from campus.domain.repository import VoteRepository
from campus.domain.value import ContentType, UserId, VoteType
from campus.persistence.errors import store_errors
from campus.persistence.mappers import row_to_vote, vote_to_dict
from campus.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _key(self, votable_type: ContentType, votable_id: UUID, voter_id: UserId):
        return and_(
            votes_table.c.votable_type == votable_type.value,
            votes_table.c.votable_id == votable_id,
            votes_table.c.voter_id == voter_id,
        )

    async def find(
        self,
        votable_type: ContentType,
        votable_id: UUID,
        voter_id: UserId,
    ) -> Optional[Vote]:
        """Find a voter's vote on a specific item."""
        stmt = select(votes_table).where(self._key(votable_type, votable_id, voter_id))
        with store_errors("vote", votable_id):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_voter_and_votables(
        self,
        voter_id: UserId,
        votable_type: ContentType,
        votable_ids: Sequence[UUID],
    ) -> List[Vote]:
        """Find a voter's votes on multiple items (batch query)."""
        if not votable_ids:
            return []

        stmt = select(votes_table).where(
            and_(
                votes_table.c.voter_id == voter_id,
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id.in_(votable_ids),
            )
        )
        with store_errors("vote"):
            result = await self.session.execute(stmt)
            rows = result.fetchall()
        return [row_to_vote(row._asdict()) for row in rows]

    async def create(self, vote: Vote) -> Vote:
        """Insert a vote."""
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        with store_errors("vote", vote.votable_id):
            await self.session.execute(stmt)
            await self.session.flush()
        return vote

    async def update_type(self, vote: Vote, vote_type: VoteType) -> Vote:
        """Flip a vote's polarity."""
        stmt = (
            update(votes_table)
            .where(self._key(vote.votable_type, vote.votable_id, vote.voter_id))
            .values(vote_type=vote_type.value)
        )
        with store_errors("vote", vote.votable_id):
            await self.session.execute(stmt)
            await self.session.flush()
        return vote.model_copy(update={"vote_type": vote_type})

    async def delete(
        self,
        votable_type: ContentType,
        votable_id: UUID,
        voter_id: UserId,
    ) -> bool:
        """Delete a voter's vote on an item."""
        stmt = delete(votes_table).where(self._key(votable_type, votable_id, voter_id))
        with store_errors("vote", votable_id):
            result = await self.session.execute(stmt)
            await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
