"""Comment entity.

Each user holds at most one comment per post. The comment is identified
by the (post, author) pair rather than a generated ID, so the single-slot
rule holds structurally.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, computed_field

from campus.domain.model.common import DomainModel, utcnow
from campus.domain.value import (
    AuthorSnapshot,
    CommentId,
    PostId,
    Reactions,
    UserId,
    comment_id_for,
)

COMMENT_MAX_LENGTH = 2000


class Comment(DomainModel):
    """Comment entity.

    Business rules:
    - Key is (post_id, author_id): one live comment per author per post
    - Editing keeps the key and ``created_at`` and sets ``edited_at``
    - ``version`` increases on every reactions write (optimistic concurrency)
    """

    post_id: PostId
    author_id: UserId
    author: AuthorSnapshot
    text: str = Field(min_length=1, max_length=COMMENT_MAX_LENGTH)
    created_at: datetime = Field(default_factory=utcnow)
    edited_at: Optional[datetime] = None
    reactions: Reactions = Field(default_factory=Reactions)
    version: int = Field(default=0, ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def id(self) -> CommentId:
        """Stable ID of this (post, author) slot."""
        return comment_id_for(self.post_id, self.author_id)
