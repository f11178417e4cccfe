"""PostgreSQL implementation of User repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from campus.domain.model import User
from campus.domain.repository import UserRepository
from campus.domain.value import UserId
from campus.persistence.errors import store_errors
from campus.persistence.mappers import row_to_user, user_to_dict
from campus.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        with store_errors("user", user_id):
            result = await self.session.execute(stmt)
            row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email, ignoring case."""
        stmt = (
            select(users_table)
            .where(func.lower(users_table.c.email) == email.lower())
            .order_by(users_table.c.created_at)
            .limit(1)
        )
        with store_errors("user", email):
            result = await self.session.execute(stmt)
            row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> User:
        """Save a user (create or update profile fields).

        Ban state is left untouched on update.

        Args:
            user: User to save

        Returns:
            Saved user
        """
        stmt = (
            insert(users_table)
            .values(**user_to_dict(user))
            .on_conflict_do_update(
                index_elements=[users_table.c.id],
                set_={
                    "display_name": user.display_name,
                    "email": user.email,
                    "avatar_url": user.avatar_url,
                    "is_admin": user.is_admin,
                },
            )
            .returning(users_table)
        )
        with store_errors("user", user.id):
            result = await self.session.execute(stmt)
            row = result.mappings().one()
            await self.session.flush()
        return row_to_user(dict(row))

    async def set_banned(
        self, user_id: UserId, banned: bool, banned_at: Optional[datetime]
    ) -> Optional[User]:
        """Set or clear a user's ban.

        Args:
            user_id: User ID to update
            banned: Whether the user is banned
            banned_at: When the ban was applied, None when lifting it

        Returns:
            Updated user, None if the user does not exist
        """
        stmt = (
            update(users_table)
            .where(users_table.c.id == user_id)
            .values(is_banned=banned, banned_at=banned_at)
            .returning(users_table)
        )
        with store_errors("user", user_id):
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            await self.session.flush()
        return row_to_user(dict(row)) if row else None
