"""Repository interfaces for the campus forum domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from campus.domain.repository.comment import CommentRepository
from campus.domain.repository.post import PostRepository
from campus.domain.repository.report import ReportRepository
from campus.domain.repository.transaction import TransactionManager
from campus.domain.repository.user import UserRepository
from campus.domain.repository.vote import VoteRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "CommentRepository",
    "VoteRepository",
    "ReportRepository",
    "TransactionManager",
]
