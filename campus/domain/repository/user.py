"""User repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from campus.domain.model.user import User
from campus.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The identity provider user ID

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email, ignoring case.

        Args:
            email: Email address to look up

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def set_banned(
        self, user_id: UserId, banned: bool, banned_at: Optional[datetime]
    ) -> Optional[User]:
        """Set or clear a user's ban.

        Args:
            user_id: The user ID
            banned: Whether the user is banned
            banned_at: When the ban started (None when lifting it)

        Returns:
            Updated user, or None if the user does not exist
        """
        pass
