"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping. Nested value objects
(author snapshot, reactions) are flattened into prefixed columns.
"""

from typing import Any, Dict
from uuid import UUID

from campus.domain.model import Comment, Post, Report, User, Vote
from campus.domain.value import (
    AuthorSnapshot,
    ContentType,
    PostCategory,
    PostId,
    Reactions,
    ReportCategory,
    ReportId,
    ReportStatus,
    UserId,
    VoteType,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _author(row: Dict[str, Any]) -> AuthorSnapshot:
    return AuthorSnapshot(
        id=UserId(row["author_id"]),
        display_name=row["author_display_name"],
        avatar_url=row.get("author_avatar_url"),
    )


def _reactions(row: Dict[str, Any]) -> Reactions:
    return Reactions(upvotes=row["upvotes"], downvotes=row["downvotes"])


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        display_name=row["display_name"],
        email=row.get("email"),
        avatar_url=row.get("avatar_url"),
        is_admin=row["is_admin"],
        is_banned=row["is_banned"],
        banned_at=row.get("banned_at"),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        author_id=UserId(row["author_id"]),
        author=_author(row),
        title=row["title"],
        text=row.get("text"),
        image_url=row.get("image_url"),
        category=PostCategory(row["category"]),
        created_at=row["created_at"],
        reactions=_reactions(row),
        comments_count=row["comments_count"],
        report_count=row["report_count"],
        is_suspended=row["is_suspended"],
        version=row["version"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": post.id,
        "author_id": post.author_id,
        "author_display_name": post.author.display_name,
        "author_avatar_url": post.author.avatar_url,
        "title": post.title,
        "text": post.text,
        "image_url": post.image_url,
        "category": post.category.value,
        "upvotes": post.reactions.upvotes,
        "downvotes": post.reactions.downvotes,
        "comments_count": post.comments_count,
        "report_count": post.report_count,
        "is_suspended": post.is_suspended,
        "version": post.version,
        "created_at": post.created_at,
    }


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    The stored ``id`` column is not read back; the model derives it from
    the (post, author) key.
    """
    return Comment(
        post_id=PostId(_uuid(row["post_id"])),
        author_id=UserId(row["author_id"]),
        author=_author(row),
        text=row["text"],
        created_at=row["created_at"],
        edited_at=row.get("edited_at"),
        reactions=_reactions(row),
        version=row["version"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return {
        "id": comment.id,
        "post_id": comment.post_id,
        "author_id": comment.author_id,
        "author_display_name": comment.author.display_name,
        "author_avatar_url": comment.author.avatar_url,
        "text": comment.text,
        "upvotes": comment.reactions.upvotes,
        "downvotes": comment.reactions.downvotes,
        "version": comment.version,
        "created_at": comment.created_at,
        "edited_at": comment.edited_at,
    }


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        votable_type=ContentType(row["votable_type"]),
        votable_id=_uuid(row["votable_id"]),
        voter_id=UserId(row["voter_id"]),
        vote_type=VoteType(row["vote_type"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return vote.model_dump(mode="python") | {
        "votable_type": vote.votable_type.value,
        "vote_type": vote.vote_type.value,
    }


def row_to_report(row: Dict[str, Any]) -> Report:
    """Convert database row to Report domain model.

    Args:
        row: Database row as dict

    Returns:
        Report domain model
    """
    return Report(
        id=ReportId(_uuid(row["id"])),
        content_id=_uuid(row["content_id"]),
        content_type=ContentType(row["content_type"]),
        content_owner_id=UserId(row["content_owner_id"]),
        reporter_id=UserId(row["reporter_id"]),
        category=ReportCategory(row["category"]),
        reason=row.get("reason"),
        created_at=row["created_at"],
        status=ReportStatus(row["status"]),
    )


def report_to_dict(report: Report) -> Dict[str, Any]:
    """Convert Report domain model to database dict."""
    return report.model_dump() | {
        "content_type": report.content_type.value,
        "category": report.category.value,
        "status": report.status.value,
    }
