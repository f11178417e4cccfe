"""Vote domain service."""

from uuid import UUID

import logfire

from campus.domain.error import NotFoundError, UnauthenticatedError
from campus.domain.model.comment import Comment
from campus.domain.model.post import Post
from campus.domain.model.vote import Vote
from campus.domain.repository import (
    CommentRepository,
    PostRepository,
    TransactionManager,
    VoteRepository,
)
from campus.domain.value import CommentId, ContentType, PostId, Reactions, UserId, VoteType

from .base import TransactionalService


class VoteService(TransactionalService):
    """Domain service for the vote ledger.

    Each (item, voter) pair holds at most one live vote. Casting a vote
    rewrites the vote record and the item's tally in one atomic scope.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        transaction: TransactionManager,
        max_attempts: int = 3,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            post_repository: Post repository
            comment_repository: Comment repository
            transaction: Transaction manager
            max_attempts: Attempts per vote before giving up on conflicts
        """
        super().__init__(transaction, max_attempts)
        self.vote_repository = vote_repository
        self.post_repository = post_repository
        self.comment_repository = comment_repository

    async def cast_vote(
        self,
        votable_type: ContentType,
        votable_id: UUID,
        voter_id: UserId | None,
        vote_type: VoteType,
    ) -> Reactions:
        """Cast, flip or withdraw a vote.

        Args:
            votable_type: Whether the item is a post or a comment
            votable_id: Post ID or comment ID
            voter_id: Voter, None if the caller is anonymous
            vote_type: Polarity being cast

        Returns:
            The item's tally after the vote

        Raises:
            UnauthenticatedError: If there is no voter
            NotFoundError: If the item does not exist
            StoreUnavailableError: If the write kept losing to concurrent voters
        """
        if voter_id is None:
            raise UnauthenticatedError("vote")

        async def apply() -> Reactions:
            target = await self._load_target(votable_type, votable_id)
            existing = await self.vote_repository.find(
                votable_type, votable_id, voter_id
            )
            previous = existing.vote_type if existing else None

            if existing is None:
                await self.vote_repository.create(
                    Vote(
                        votable_type=votable_type,
                        votable_id=votable_id,
                        voter_id=voter_id,
                        vote_type=vote_type,
                    )
                )
            elif previous == vote_type:
                await self.vote_repository.delete(votable_type, votable_id, voter_id)
            else:
                await self.vote_repository.update_type(existing, vote_type)

            reactions = target.reactions.apply(previous, vote_type)
            await self._save_reactions(target, reactions)
            return reactions

        with logfire.span(
            "vote_service.cast_vote",
            votable_type=votable_type.value,
            votable_id=str(votable_id),
            voter_id=voter_id,
            vote_type=vote_type.value,
        ):
            reactions = await self.run_atomic("cast_vote", apply)
            logfire.info(
                "Vote cast",
                votable_id=str(votable_id),
                voter_id=voter_id,
                upvotes=reactions.upvotes,
                downvotes=reactions.downvotes,
            )
            return reactions

    async def get_vote(
        self, votable_type: ContentType, votable_id: UUID, voter_id: UserId
    ) -> VoteType | None:
        """Get a voter's live vote on an item.

        Args:
            votable_type: Whether the item is a post or a comment
            votable_id: Post ID or comment ID
            voter_id: Voter

        Returns:
            The vote's polarity, None if the voter has no live vote
        """
        vote = await self.vote_repository.find(votable_type, votable_id, voter_id)
        return vote.vote_type if vote else None

    async def get_votes_for_comments(
        self, voter_id: UserId, comment_ids: list[CommentId]
    ) -> dict[CommentId, VoteType]:
        """Get a voter's live votes on a batch of comments.

        Args:
            voter_id: Voter
            comment_ids: Comments to check

        Returns:
            Polarity per comment the voter has voted on
        """
        if not comment_ids:
            return {}

        # One query for the whole batch
        votes = await self.vote_repository.find_by_voter_and_votables(
            voter_id=voter_id,
            votable_type=ContentType.COMMENT,
            votable_ids=list(comment_ids),
        )
        return {CommentId(vote.votable_id): vote.vote_type for vote in votes}

    async def _load_target(
        self, votable_type: ContentType, votable_id: UUID
    ) -> Post | Comment:
        if votable_type == ContentType.POST:
            target: Post | Comment | None = await self.post_repository.find_by_id(
                PostId(votable_id)
            )
        else:
            target = await self.comment_repository.find_by_id(CommentId(votable_id))

        if target is None:
            logfire.warn(
                "Vote on non-existent item",
                votable_type=votable_type.value,
                votable_id=str(votable_id),
            )
            raise NotFoundError(votable_type.value.capitalize(), str(votable_id))
        return target

    async def _save_reactions(self, target: Post | Comment, reactions: Reactions) -> None:
        updated = target.model_copy(update={"reactions": reactions})
        if isinstance(updated, Post):
            await self.post_repository.update(updated, expected_version=target.version)
        else:
            await self.comment_repository.update(
                updated, expected_version=target.version
            )
