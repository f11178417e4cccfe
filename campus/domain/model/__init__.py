"""Domain model entities for the campus forum."""

from campus.domain.model.comment import Comment
from campus.domain.model.post import SUSPENSION_THRESHOLD, Post
from campus.domain.model.report import Report
from campus.domain.model.user import User
from campus.domain.model.vote import Vote

__all__ = [
    "User",
    "Post",
    "Comment",
    "Vote",
    "Report",
    "SUSPENSION_THRESHOLD",
]
