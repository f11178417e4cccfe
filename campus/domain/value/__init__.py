"""Domain value objects for the campus forum."""

from campus.domain.value.identifiers import (
    CommentId,
    PostId,
    ReportId,
    UserId,
    comment_id_for,
)
from campus.domain.value.types import (
    AuthorSnapshot,
    ContentType,
    PostCategory,
    Principal,
    Reactions,
    ReportCategory,
    ReportStatus,
    VoteType,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "ReportId",
    "comment_id_for",
    # Types
    "VoteType",
    "ContentType",
    "PostCategory",
    "ReportCategory",
    "ReportStatus",
    "Principal",
    "AuthorSnapshot",
    "Reactions",
]
