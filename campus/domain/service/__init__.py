"""Domain services."""

from .base import Service, TransactionalService
from .comment_service import CommentService
from .jwt_service import JWTService
from .post_service import PostService
from .report_service import ReportService
from .user_service import UserService
from .vote_service import VoteService

__all__ = [
    "CommentService",
    "JWTService",
    "PostService",
    "ReportService",
    "Service",
    "TransactionalService",
    "UserService",
    "VoteService",
]
