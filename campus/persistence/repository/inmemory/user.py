"""In-memory user repository for testing."""

from datetime import datetime
from typing import Optional

from campus.domain.model.user import User
from campus.domain.repository.user import UserRepository
from campus.domain.value import UserId

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self.store.users.get(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email, ignoring case."""
        wanted = email.lower()
        matches = [
            u for u in self.store.users.values() if u.email and u.email.lower() == wanted
        ]
        return min(matches, key=lambda u: u.created_at) if matches else None

    async def save(self, user: User) -> User:
        """Insert a user or update its profile fields and admin flag."""
        existing = self.store.users.get(user.id)
        if existing:
            user = existing.model_copy(
                update={
                    "display_name": user.display_name,
                    "email": user.email,
                    "avatar_url": user.avatar_url,
                    "is_admin": user.is_admin,
                }
            )
        self.store.users[user.id] = user
        return user

    async def set_banned(
        self, user_id: UserId, banned: bool, banned_at: Optional[datetime]
    ) -> Optional[User]:
        """Set or clear a user's ban."""
        user = self.store.users.get(user_id)
        if user is None:
            return None
        updated = user.model_copy(update={"is_banned": banned, "banned_at": banned_at})
        self.store.users[user_id] = updated
        return updated
