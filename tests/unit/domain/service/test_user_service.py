"""Unit tests for UserService."""

import pytest

from campus.domain.error import (
    NotAuthorizedError,
    NotFoundError,
    UnauthenticatedError,
    UserBannedError,
)
from campus.config import ModerationSettings
from campus.domain.service import UserService
from campus.domain.value import UserId
from campus.persistence.repository.inmemory import (
    InMemoryStore,
    InMemoryUserRepository,
)
from tests.conftest import make_principal
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestRegister:
    """Tests for register."""

    @pytest.mark.asyncio
    async def test_first_sight_creates_user(self, unit_env):
        """A new principal should be stored as a regular user."""
        user_service = await unit_env.get(UserService)
        principal = make_principal("idp|new-student")

        user = await user_service.register(principal)

        assert user.id == principal.id
        assert user.display_name == principal.display_name
        assert user.is_admin is False
        assert user.is_banned is False
        assert await user_service.get_user_by_id(principal.id) == user

    @pytest.mark.asyncio
    async def test_profile_refreshed_from_principal(self, unit_env):
        """A changed display name at the identity provider should be picked up."""
        user_service = await unit_env.get(UserService)
        await user_service.register(make_principal("idp|s1", display_name="Sam"))

        user = await user_service.register(
            make_principal("idp|s1", display_name="Samira")
        )

        assert user.display_name == "Samira"

    @pytest.mark.asyncio
    async def test_admin_email_grants_admin(self, unit_env, admin_email):
        """Principals with a configured email become administrators."""
        user_service = await unit_env.get(UserService)

        user = await user_service.register(
            make_principal("idp|dean", email=admin_email.upper())
        )

        assert user.is_admin is True


class TestAdminFlagAtSignIn:
    """The admin flag follows the configured emails across sign-ins."""

    @staticmethod
    def _service(store: InMemoryStore, admin_emails: list[str]) -> UserService:
        return UserService(
            InMemoryUserRepository(store),
            ModerationSettings(admin_emails=admin_emails),
        )

    @pytest.mark.asyncio
    async def test_removed_admin_demoted_on_next_sign_in(self):
        """Dropping an email from the list should revoke admin rights."""
        store = InMemoryStore()
        principal = make_principal("idp|dean", email="dean@example.edu")

        before = await self._service(store, ["dean@example.edu"]).register(principal)
        after = await self._service(store, []).register(principal)

        assert before.is_admin is True
        assert after.is_admin is False

    @pytest.mark.asyncio
    async def test_existing_user_promoted_on_next_sign_in(self):
        """Adding an email to the list should grant admin rights to a known user."""
        store = InMemoryStore()
        principal = make_principal("idp|ta", email="ta@example.edu")

        before = await self._service(store, []).register(principal)
        after = await self._service(store, ["TA@example.edu"]).register(principal)

        assert before.is_admin is False
        assert after.is_admin is True

    @pytest.mark.asyncio
    async def test_ban_survives_sign_in(self):
        """Signing in again should not lift a ban."""
        store = InMemoryStore()
        service = self._service(store, [])
        principal = make_principal("idp|troll")
        await service.register(principal)
        await service.ban_user(principal.id)

        user = await service.register(principal)

        assert user.is_banned is True


class TestLookups:
    """Tests for get_user_by_email and get_viewer."""

    @pytest.mark.asyncio
    async def test_email_lookup_ignores_case_and_whitespace(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await user_service.register(
            make_principal("idp|s2", email="Jo.Student@students.example.edu")
        )

        found = await user_service.get_user_by_email(
            "  jo.student@STUDENTS.example.edu "
        )

        assert found == user
        assert await user_service.get_user_by_email("nobody@example.edu") is None

    @pytest.mark.asyncio
    async def test_viewer_resolution(self, unit_env):
        """Anonymous readers have no viewer; signed-in readers are registered."""
        user_service = await unit_env.get(UserService)
        principal = make_principal("idp|reader")

        assert await user_service.get_viewer(None) is None
        viewer = await user_service.get_viewer(principal)

        assert viewer.id == principal.id
        assert await user_service.get_user_by_id(principal.id) == viewer


class TestAccessChecks:
    """Tests for require_active_user and require_admin."""

    @pytest.mark.asyncio
    async def test_anonymous_rejected(self, unit_env):
        """No principal means UnauthenticatedError."""
        user_service = await unit_env.get(UserService)

        with pytest.raises(UnauthenticatedError, match="Sign in to vote"):
            await user_service.require_active_user(None, "vote")
        with pytest.raises(UnauthenticatedError):
            await user_service.require_admin(None)

    @pytest.mark.asyncio
    async def test_banned_user_blocked_until_unbanned(self, unit_env):
        """Banned users cannot write; lifting the ban restores access."""
        user_service = await unit_env.get(UserService)
        principal = make_principal("idp|troll")
        await user_service.register(principal)

        banned = await user_service.ban_user(principal.id)
        assert banned.is_banned is True
        assert banned.banned_at is not None

        with pytest.raises(UserBannedError):
            await user_service.require_active_user(principal, "comment")

        await user_service.unban_user(principal.id)
        user = await user_service.require_active_user(principal, "comment")
        assert user.is_banned is False
        assert user.banned_at is None

    @pytest.mark.asyncio
    async def test_non_admin_rejected(self, unit_env):
        """Regular users cannot moderate."""
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotAuthorizedError, match="Administrator"):
            await user_service.require_admin(make_principal("idp|student"))

    @pytest.mark.asyncio
    async def test_ban_unknown_user_not_found(self, unit_env):
        """Banning a user who never signed in should raise NotFoundError."""
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await user_service.ban_user(UserId("idp|ghost"))
