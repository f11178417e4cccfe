"""Report entity.

Reports flag abusive posts or comments for moderator review.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field, model_validator

from campus.domain.model.common import DomainModel, utcnow
from campus.domain.value import (
    ContentType,
    ReportCategory,
    ReportId,
    ReportStatus,
    UserId,
)


class Report(DomainModel):
    """Report entity.

    Business rules:
    - One report per reporter per content item
    - Users cannot report their own content
    - The ``other`` category requires a free-text reason
    """

    id: ReportId
    content_id: UUID  # PostId or CommentId
    content_type: ContentType
    content_owner_id: UserId
    reporter_id: UserId
    category: ReportCategory
    reason: Optional[str] = Field(default=None, max_length=1000)
    created_at: datetime = Field(default_factory=utcnow)
    status: ReportStatus = ReportStatus.PENDING

    @model_validator(mode="after")
    def validate_reporter(self) -> "Report":
        """Validate that the reporter is not the content owner."""
        if self.reporter_id == self.content_owner_id:
            raise ValueError("Users cannot report their own content")
        return self
