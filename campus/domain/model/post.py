"""Post aggregate root.

Posts are text and/or image submissions filed under a category. Besides
their content they carry three denormalized counters (reactions, comment
count, report count) that only the vote, comment and report services write.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from campus.domain.model.common import DomainModel, utcnow
from campus.domain.value import AuthorSnapshot, PostCategory, PostId, Reactions, UserId

# Reports on a post at which it is automatically suspended
SUSPENSION_THRESHOLD = 5


class Post(DomainModel):
    """Post aggregate root.

    Business rules:
    - A post needs text, an image, or both
    - Counters are never negative
    - Suspension is one-way: once suspended, only deletion changes visibility
    - ``version`` increases on every counter write (optimistic concurrency)
    """

    id: PostId
    author_id: UserId
    author: AuthorSnapshot
    title: str = Field(min_length=1, max_length=300)
    text: Optional[str] = Field(default=None, max_length=5000)
    image_url: Optional[str] = None
    category: PostCategory
    created_at: datetime = Field(default_factory=utcnow)
    reactions: Reactions = Field(default_factory=Reactions)
    comments_count: int = Field(default=0, ge=0)
    report_count: int = Field(default=0, ge=0)
    is_suspended: bool = False
    version: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def validate_content(self) -> "Post":
        """Validate that the post has text or an image."""
        if not self.text and not self.image_url:
            raise ValueError("A post needs text or an image")
        return self

    def with_report(self) -> "Post":
        """Return the post with one more report counted.

        Reaching the suspension threshold suspends the post in the same
        update.
        """
        report_count = self.report_count + 1
        return self.model_copy(
            update={
                "report_count": report_count,
                "is_suspended": self.is_suspended
                or report_count >= SUSPENSION_THRESHOLD,
            }
        )

    def with_comments_count(self, delta: int) -> "Post":
        """Return the post with its comment count moved by ``delta`` (floored at 0)."""
        return self.model_copy(
            update={"comments_count": max(0, self.comments_count + delta)}
        )
