"""Mock persistence providers for testing."""

from dishka import Scope, provide

from campus.domain.repository import (
    CommentRepository,
    PostRepository,
    ReportRepository,
    TransactionManager,
    UserRepository,
    VoteRepository,
)
from campus.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryPostRepository,
    InMemoryReportRepository,
    InMemoryStore,
    InMemoryTransactionManager,
    InMemoryUserRepository,
    InMemoryVoteRepository,
)
from campus.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The store is APP-scoped so records survive across the requests of one
    container (e2e tests); each test builds its own container, so tests
    stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        """Provide the shared in-memory store."""
        return InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_transaction_manager(self, store: InMemoryStore) -> TransactionManager:
        """Provide snapshot-backed transaction manager."""
        return InMemoryTransactionManager(store)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, store: InMemoryStore) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, store: InMemoryStore) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, store: InMemoryStore) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, store: InMemoryStore) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_report_repository(self, store: InMemoryStore) -> ReportRepository:
        """Provide in-memory report repository."""
        return InMemoryReportRepository(store)
