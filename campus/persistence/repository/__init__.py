"""PostgreSQL repository implementations."""

from campus.persistence.repository.comment import PostgresCommentRepository
from campus.persistence.repository.post import PostgresPostRepository
from campus.persistence.repository.report import PostgresReportRepository
from campus.persistence.repository.user import PostgresUserRepository
from campus.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresVoteRepository",
    "PostgresReportRepository",
]
