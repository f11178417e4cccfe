"""Strongly typed identifiers for forum domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID, uuid5

# Identity provider user IDs are opaque strings
UserId = NewType("UserId", str)

PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
ReportId = NewType("ReportId", UUID)


def comment_id_for(post_id: PostId, author_id: UserId) -> CommentId:
    """Derive the ID of an author's comment slot on a post.

    A comment is identified by (post, author). The derived UUID gives that
    pair a single key usable wherever a comment is referenced on its own
    (votes, reports).

    Args:
        post_id: Post ID
        author_id: Comment author's user ID

    Returns:
        Deterministic comment ID
    """
    return CommentId(uuid5(post_id, author_id))
