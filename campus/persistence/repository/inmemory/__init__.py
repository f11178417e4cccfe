"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .post import InMemoryPostRepository
from .report import InMemoryReportRepository
from .store import InMemoryStore, InMemoryTransactionManager
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryPostRepository",
    "InMemoryReportRepository",
    "InMemoryStore",
    "InMemoryTransactionManager",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
