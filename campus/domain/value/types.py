"""Domain value objects for the campus forum.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import Field

from campus.domain.value.common import ValueObject
from campus.domain.value.identifiers import UserId


class VoteType(str, Enum):
    """Polarity of a vote."""

    UP = "up"
    DOWN = "down"


class ContentType(str, Enum):
    """Type of content that can be voted on or reported."""

    POST = "post"
    COMMENT = "comment"


class PostCategory(str, Enum):
    """Board a post is filed under."""

    ACADEMICS = "Academics"
    CAMPUS_LIFE = "Campus Life"
    EVENTS = "Events"
    QUESTION = "Question"
    COMPLAINT = "Complaint"
    DISCUSSION = "Discussion"
    OTHER = "Other"


class ReportCategory(str, Enum):
    """Abuse category chosen by a reporter."""

    HATE_SPEECH = "hate-speech"
    RELIGIOUS_EXTREMISM = "religious-extremism"
    SEXUAL_CONTENT = "sexual-content"
    BULLYING_HARASSMENT = "bullying-harassment"
    SPAM = "spam"
    MISINFORMATION = "misinformation"
    OTHER = "other"

    @property
    def requires_reason(self) -> bool:
        """Whether the reporter must describe the problem in free text."""
        return self == ReportCategory.OTHER


class ReportStatus(str, Enum):
    """Moderation status of a report."""

    PENDING = "pending"
    REVIEWED = "reviewed"
    RESOLVED = "resolved"


class Principal(ValueObject):
    """Authenticated identity supplied by the identity provider.

    Trusted as-is; the forum performs no independent verification.
    """

    id: UserId
    display_name: str
    email: str | None = None
    avatar_url: str | None = None


class AuthorSnapshot(ValueObject):
    """Author details denormalized onto posts and comments."""

    id: UserId
    display_name: str
    avatar_url: str | None = None

    @classmethod
    def from_principal(cls, principal: Principal) -> "AuthorSnapshot":
        """Build a snapshot from the authenticated principal."""
        return cls(
            id=principal.id,
            display_name=principal.display_name,
            avatar_url=principal.avatar_url,
        )


class Reactions(ValueObject):
    """Up/down vote tally of a post or comment.

    Counters never drop below zero, even if the stored tally has drifted
    from the live vote records.
    """

    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)

    def apply(self, previous: VoteType | None, new: VoteType) -> "Reactions":
        """Return the tally after a voter casts ``new``.

        Args:
            previous: The voter's live vote before this one, if any
            new: The polarity being cast

        Returns:
            Updated tally:
            - no previous vote: the ``new`` counter goes up by one
            - same polarity: the vote is toggled off, ``new`` goes down by one
            - opposite polarity: ``new`` goes up, ``previous`` goes down
        """
        counts = {VoteType.UP: self.upvotes, VoteType.DOWN: self.downvotes}

        if previous is None:
            counts[new] += 1
        elif previous == new:
            counts[new] = max(0, counts[new] - 1)
        else:
            counts[new] += 1
            counts[previous] = max(0, counts[previous] - 1)

        return Reactions(upvotes=counts[VoteType.UP], downvotes=counts[VoteType.DOWN])
