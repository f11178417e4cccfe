"""Shared in-memory store for testing."""

from contextlib import asynccontextmanager
from dataclasses import dataclass, field, replace
from typing import AsyncIterator
from uuid import UUID

from campus.domain.model import Comment, Post, Report, User, Vote
from campus.domain.repository import TransactionManager
from campus.domain.value import ContentType, PostId, ReportId, UserId

VoteKey = tuple[ContentType, UUID, UserId]


@dataclass
class InMemoryStore:
    """Records shared by all in-memory repositories of one container.

    Domain models are frozen, so copying the dicts is enough to snapshot
    the whole store.
    """

    users: dict[UserId, User] = field(default_factory=dict)
    posts: dict[PostId, Post] = field(default_factory=dict)
    comments: dict[tuple[PostId, UserId], Comment] = field(default_factory=dict)
    votes: dict[VoteKey, Vote] = field(default_factory=dict)
    reports: dict[ReportId, Report] = field(default_factory=dict)

    def snapshot(self) -> "InMemoryStore":
        """Copy every table."""
        return replace(
            self,
            users=dict(self.users),
            posts=dict(self.posts),
            comments=dict(self.comments),
            votes=dict(self.votes),
            reports=dict(self.reports),
        )

    def restore(self, snapshot: "InMemoryStore") -> None:
        """Put every table back to a snapshot."""
        self.users = snapshot.users
        self.posts = snapshot.posts
        self.comments = snapshot.comments
        self.votes = snapshot.votes
        self.reports = snapshot.reports


class InMemoryTransactionManager(TransactionManager):
    """Atomic scopes that restore a store snapshot on error."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        """Snapshot the store and restore it if the block raises."""
        snapshot = self.store.snapshot()
        try:
            yield
        except BaseException:
            self.store.restore(snapshot)
            raise
