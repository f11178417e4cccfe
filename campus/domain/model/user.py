"""User aggregate root.

Users are registered from the identity provider's principal the first
time they make an authenticated request.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from campus.domain.model.common import DomainModel, utcnow
from campus.domain.value import UserId


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    display_name: str
    email: Optional[str] = None
    avatar_url: Optional[str] = None
    is_admin: bool = False
    is_banned: bool = False
    banned_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=utcnow)
