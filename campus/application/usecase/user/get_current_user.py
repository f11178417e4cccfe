"""Get current user use case."""

from datetime import datetime

from pydantic import BaseModel

from campus.domain.error import UnauthenticatedError
from campus.domain.model import User
from campus.domain.service import UserService
from campus.domain.value import Principal


class UserResponse(BaseModel):
    """User account in responses."""

    user_id: str
    display_name: str
    email: str | None
    avatar_url: str | None
    is_admin: bool
    is_banned: bool
    banned_at: datetime | None
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        """Build the response for a user."""
        return cls(
            user_id=user.id,
            display_name=user.display_name,
            email=user.email,
            avatar_url=user.avatar_url,
            is_admin=user.is_admin,
            is_banned=user.is_banned,
            banned_at=user.banned_at,
            created_at=user.created_at,
        )


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    principal: Principal | None = None


class GetCurrentUserUseCase:
    """Use case for getting the signed-in user's account."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> UserResponse:
        """Execute get current user flow.

        The account is registered on first sight of the principal.

        Raises:
            UnauthenticatedError: If the caller is anonymous
        """
        if request.principal is None:
            raise UnauthenticatedError("view your account")

        user = await self.user_service.register(request.principal)
        return UserResponse.from_user(user)
