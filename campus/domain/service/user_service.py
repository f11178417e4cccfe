"""User domain service."""

import logfire

from campus.config import ModerationSettings
from campus.domain.error import (
    NotAuthorizedError,
    NotFoundError,
    UnauthenticatedError,
    UserBannedError,
)
from campus.domain.model.common import utcnow
from campus.domain.model.user import User
from campus.domain.repository import UserRepository
from campus.domain.value import Principal, UserId

from .base import Service


class UserService(Service):
    """Domain service for user registration, access checks and bans."""

    def __init__(
        self,
        user_repository: UserRepository,
        moderation_settings: ModerationSettings,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            moderation_settings: Moderation settings (administrator emails)
        """
        self.user_repository = user_repository
        self.moderation_settings = moderation_settings

    async def get_user_by_id(self, user_id: UserId) -> User | None:
        """Get a user by ID.

        Args:
            user_id: User ID

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_id", user_id=user_id):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=user_id)
            return user

    async def get_viewer(self, principal: Principal | None) -> User | None:
        """Resolve the reader behind an optional principal for visibility checks.

        Signed-in readers are registered on first sight, like writers.
        """
        if principal is None:
            return None
        return await self.register(principal)

    async def get_user_by_email(self, email: str) -> User | None:
        """Get a user by email, ignoring case.

        Args:
            email: Email address

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_email"):
            user = await self.user_repository.find_by_email(email.strip())
            if not user:
                logfire.info("No user with email")
            return user

    async def register(self, principal: Principal) -> User:
        """Get the user for a principal, creating the record on first sight.

        Profile fields are refreshed from the principal when they changed
        at the identity provider. The admin flag is recomputed from the
        configured administrator emails on every sign-in.

        Args:
            principal: Authenticated identity

        Returns:
            The user record
        """
        with logfire.span("user_service.register", user_id=principal.id):
            existing = await self.user_repository.find_by_id(principal.id)

            if existing is None:
                user = User(
                    id=principal.id,
                    display_name=principal.display_name,
                    email=principal.email,
                    avatar_url=principal.avatar_url,
                    is_admin=self._is_admin_email(principal.email),
                )
                saved = await self.user_repository.save(user)
                logfire.info(
                    "User registered", user_id=saved.id, is_admin=saved.is_admin
                )
                return saved

            profile = {
                "display_name": principal.display_name,
                "email": principal.email,
                "avatar_url": principal.avatar_url,
                "is_admin": self._is_admin_email(principal.email),
            }
            if any(getattr(existing, k) != v for k, v in profile.items()):
                existing = await self.user_repository.save(
                    existing.model_copy(update=profile)
                )
                logfire.info("User profile refreshed", user_id=existing.id)

            return existing

    async def require_active_user(
        self, principal: Principal | None, action: str
    ) -> User:
        """Resolve the acting user for a write, rejecting anonymous and banned users.

        Args:
            principal: Authenticated identity, None if the caller is anonymous
            action: What the caller is trying to do (used in the error message)

        Returns:
            The acting user

        Raises:
            UnauthenticatedError: If there is no principal
            UserBannedError: If the user is banned
        """
        if principal is None:
            raise UnauthenticatedError(action)

        user = await self.register(principal)
        if user.is_banned:
            logfire.warn("Banned user attempted write", user_id=user.id, action=action)
            raise UserBannedError(user.id)
        return user

    async def require_admin(self, principal: Principal | None) -> User:
        """Resolve the acting user and require administrator rights.

        Args:
            principal: Authenticated identity

        Returns:
            The administrator

        Raises:
            UnauthenticatedError: If there is no principal
            NotAuthorizedError: If the user is not an administrator
        """
        if principal is None:
            raise UnauthenticatedError("moderate the forum")

        user = await self.register(principal)
        if not user.is_admin:
            logfire.warn("Non-admin attempted moderation", user_id=user.id)
            raise NotAuthorizedError("Administrator access required")
        return user

    async def ban_user(self, user_id: UserId) -> User:
        """Ban a user.

        Args:
            user_id: User to ban

        Returns:
            Updated user

        Raises:
            NotFoundError: If the user does not exist
        """
        with logfire.span("user_service.ban_user", user_id=user_id):
            updated = await self.user_repository.set_banned(user_id, True, utcnow())
            if updated is None:
                raise NotFoundError("User", user_id)
            logfire.info("User banned", user_id=user_id)
            return updated

    async def unban_user(self, user_id: UserId) -> User:
        """Lift a user's ban.

        Args:
            user_id: User to unban

        Returns:
            Updated user

        Raises:
            NotFoundError: If the user does not exist
        """
        with logfire.span("user_service.unban_user", user_id=user_id):
            updated = await self.user_repository.set_banned(user_id, False, None)
            if updated is None:
                raise NotFoundError("User", user_id)
            logfire.info("User unbanned", user_id=user_id)
            return updated

    def _is_admin_email(self, email: str | None) -> bool:
        if not email:
            return False
        admin_emails = {e.lower() for e in self.moderation_settings.admin_emails}
        return email.lower() in admin_emails
