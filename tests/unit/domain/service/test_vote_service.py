"""Unit tests for VoteService."""

from uuid import uuid4

import pytest

from campus.domain.error import (
    NotFoundError,
    StoreUnavailableError,
    UnauthenticatedError,
)
from campus.domain.model import Comment
from campus.domain.repository import CommentRepository, PostRepository, VoteRepository
from campus.domain.service import VoteService
from campus.domain.value import (
    AuthorSnapshot,
    ContentType,
    PostId,
    Reactions,
    UserId,
    VoteType,
)
from campus.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryStore,
    InMemoryTransactionManager,
    InMemoryVoteRepository,
)
from tests.conftest import FlakyPostRepository, make_post, save_post
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()

VOTER = UserId("idp|voter")


def _flaky_service(store: InMemoryStore, failures: int, max_attempts: int = 3):
    post_repo = FlakyPostRepository(store, failures)
    service = VoteService(
        vote_repository=InMemoryVoteRepository(store),
        post_repository=post_repo,
        comment_repository=InMemoryCommentRepository(store),
        transaction=InMemoryTransactionManager(store),
        max_attempts=max_attempts,
    )
    return service, post_repo


class TestCastVoteOnPost:
    """Tests for cast_vote on posts."""

    @pytest.mark.asyncio
    async def test_first_upvote_creates_vote_and_counts_it(self, unit_env):
        """A first upvote should record the vote and bump upvotes."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        post = await save_post(await unit_env.get(PostRepository))

        # Act
        reactions = await vote_service.cast_vote(
            ContentType.POST, post.id, VOTER, VoteType.UP
        )

        # Assert
        assert reactions == Reactions(upvotes=1, downvotes=0)
        vote = await vote_repo.find(ContentType.POST, post.id, VOTER)
        assert vote is not None
        assert vote.vote_type == VoteType.UP

    @pytest.mark.asyncio
    async def test_repeat_vote_toggles_off(self, unit_env):
        """Casting the same polarity twice should leave no vote."""
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        post_repo = await unit_env.get(PostRepository)
        post = await save_post(post_repo)

        await vote_service.cast_vote(ContentType.POST, post.id, VOTER, VoteType.UP)
        reactions = await vote_service.cast_vote(
            ContentType.POST, post.id, VOTER, VoteType.UP
        )

        assert reactions == Reactions(upvotes=0, downvotes=0)
        assert await vote_repo.find(ContentType.POST, post.id, VOTER) is None
        stored = await post_repo.find_by_id(post.id)
        assert stored.reactions == Reactions(upvotes=0, downvotes=0)

    @pytest.mark.asyncio
    async def test_opposite_vote_flips(self, unit_env):
        """A downvote followed by an upvote should leave one upvote."""
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        post = await save_post(await unit_env.get(PostRepository))

        await vote_service.cast_vote(ContentType.POST, post.id, VOTER, VoteType.DOWN)
        reactions = await vote_service.cast_vote(
            ContentType.POST, post.id, VOTER, VoteType.UP
        )

        assert reactions == Reactions(upvotes=1, downvotes=0)
        vote = await vote_repo.find(ContentType.POST, post.id, VOTER)
        assert vote.vote_type == VoteType.UP

    @pytest.mark.asyncio
    async def test_votes_from_different_users_accumulate(self, unit_env):
        """Each voter should count once."""
        vote_service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        post = await save_post(post_repo)

        await vote_service.cast_vote(
            ContentType.POST, post.id, UserId("idp|a"), VoteType.UP
        )
        await vote_service.cast_vote(
            ContentType.POST, post.id, UserId("idp|b"), VoteType.UP
        )
        await vote_service.cast_vote(
            ContentType.POST, post.id, UserId("idp|c"), VoteType.DOWN
        )

        stored = await post_repo.find_by_id(post.id)
        assert stored.reactions == Reactions(upvotes=2, downvotes=1)
        assert stored.version == 3

    @pytest.mark.asyncio
    async def test_anonymous_vote_rejected(self, unit_env):
        """Voting without a principal should be rejected."""
        vote_service = await unit_env.get(VoteService)
        post = await save_post(await unit_env.get(PostRepository))

        with pytest.raises(UnauthenticatedError):
            await vote_service.cast_vote(ContentType.POST, post.id, None, VoteType.UP)

    @pytest.mark.asyncio
    async def test_vote_on_missing_post_not_found(self, unit_env):
        """Voting on an unknown post should raise NotFoundError."""
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(NotFoundError):
            await vote_service.cast_vote(
                ContentType.POST, PostId(uuid4()), VOTER, VoteType.UP
            )


class TestCastVoteOnComment:
    """Tests for cast_vote on comments."""

    @pytest.mark.asyncio
    async def test_comment_vote_updates_comment_tally(self, unit_env):
        """A comment vote should move the comment's tally, not the post's."""
        vote_service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        post = await save_post(post_repo)
        comment = await comment_repo.create(
            Comment(
                post_id=post.id,
                author_id=UserId("idp|commenter"),
                author=AuthorSnapshot(id=UserId("idp|commenter"), display_name="C"),
                text="Yes, until midnight.",
            )
        )

        reactions = await vote_service.cast_vote(
            ContentType.COMMENT, comment.id, VOTER, VoteType.DOWN
        )

        assert reactions == Reactions(upvotes=0, downvotes=1)
        stored_comment = await comment_repo.find(post.id, comment.author_id)
        assert stored_comment.reactions.downvotes == 1
        stored_post = await post_repo.find_by_id(post.id)
        assert stored_post.reactions == Reactions()


class TestConcurrentVotes:
    """Tests for the optimistic retry loop."""

    @pytest.mark.asyncio
    async def test_lost_race_is_retried(self):
        """A lost compare-and-set should be retried until it lands."""
        store = InMemoryStore()
        service, post_repo = _flaky_service(store, failures=1)
        post = await post_repo.create(make_post())

        reactions = await service.cast_vote(
            ContentType.POST, post.id, VOTER, VoteType.UP
        )

        assert reactions.upvotes == 1
        assert post_repo.update_calls == 2
        assert store.posts[post.id].reactions.upvotes == 1
        assert store.posts[post.id].version == 1

    @pytest.mark.asyncio
    async def test_lost_race_rolls_back_vote_record(self):
        """The vote written in a failed attempt should be rolled back.

        Otherwise the retry would see its own earlier vote and toggle it off.
        """
        store = InMemoryStore()
        service, post_repo = _flaky_service(store, failures=2)
        post = await post_repo.create(make_post())

        reactions = await service.cast_vote(
            ContentType.POST, post.id, VOTER, VoteType.UP
        )

        assert reactions.upvotes == 1

        votes = [v for v in store.votes.values() if v.voter_id == VOTER]
        assert len(votes) == 1

    @pytest.mark.asyncio
    async def test_gives_up_after_max_attempts(self):
        """Losing every attempt should surface StoreUnavailableError."""
        store = InMemoryStore()
        service, post_repo = _flaky_service(store, failures=10, max_attempts=3)
        post = await post_repo.create(make_post())

        with pytest.raises(StoreUnavailableError, match="Please try again"):
            await service.cast_vote(ContentType.POST, post.id, VOTER, VoteType.UP)

        assert post_repo.update_calls == 3
        assert (ContentType.POST, post.id, VOTER) not in store.votes


class TestGetVotes:
    """Tests for vote lookups."""

    @pytest.mark.asyncio
    async def test_get_vote_returns_live_polarity(self, unit_env):
        """get_vote should return the held polarity or None."""
        vote_service = await unit_env.get(VoteService)
        post = await save_post(await unit_env.get(PostRepository))

        assert await vote_service.get_vote(ContentType.POST, post.id, VOTER) is None

        await vote_service.cast_vote(ContentType.POST, post.id, VOTER, VoteType.DOWN)

        assert (
            await vote_service.get_vote(ContentType.POST, post.id, VOTER)
            == VoteType.DOWN
        )

    @pytest.mark.asyncio
    async def test_get_votes_for_comments_batches(self, unit_env):
        """Only comments the voter voted on should appear in the result."""
        vote_service = await unit_env.get(VoteService)
        comment_repo = await unit_env.get(CommentRepository)
        post = await save_post(await unit_env.get(PostRepository))

        comments = []
        for author in ("idp|a", "idp|b"):
            comments.append(
                await comment_repo.create(
                    Comment(
                        post_id=post.id,
                        author_id=UserId(author),
                        author=AuthorSnapshot(id=UserId(author), display_name=author),
                        text="Agreed",
                    )
                )
            )
        await vote_service.cast_vote(
            ContentType.COMMENT, comments[0].id, VOTER, VoteType.UP
        )

        votes = await vote_service.get_votes_for_comments(
            VOTER, [c.id for c in comments]
        )

        assert votes == {comments[0].id: VoteType.UP}
        assert await vote_service.get_votes_for_comments(VOTER, []) == {}
