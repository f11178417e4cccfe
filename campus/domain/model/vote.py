"""Vote entity.

Votes are up or down. Each user holds at most one live vote per item
(post or comment); the (item, voter) pair is the vote's identity.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from campus.domain.model.common import DomainModel, utcnow
from campus.domain.value import ContentType, UserId, VoteType


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per user per item (enforced by unique constraint)
    - Casting the same polarity again removes the vote
    - Casting the opposite polarity flips it
    - Polymorphic reference to votable (post or comment)
    """

    votable_type: ContentType
    votable_id: UUID  # PostId or CommentId (both are UUIDs)
    voter_id: UserId
    vote_type: VoteType
    created_at: datetime = Field(default_factory=utcnow)
