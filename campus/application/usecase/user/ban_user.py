"""Ban user use case."""

from pydantic import BaseModel

from campus.domain.error import NotAuthorizedError
from campus.domain.service import UserService
from campus.domain.value import Principal, UserId

from .get_current_user import UserResponse


class BanUserRequest(BaseModel):
    """Ban or unban user request."""

    user_id: str
    banned: bool  # False lifts the ban
    principal: Principal | None = None


class BanUserUseCase:
    """Use case for banning and unbanning users."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize ban user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: BanUserRequest) -> UserResponse:
        """Execute ban user flow.

        Banned users keep read access but every write is rejected.

        Args:
            request: Ban user request

        Returns:
            The updated user

        Raises:
            UnauthenticatedError: If the caller is anonymous
            NotAuthorizedError: If the caller is not an administrator or bans themselves
            NotFoundError: If the user does not exist
        """
        admin = await self.user_service.require_admin(request.principal)
        user_id = UserId(request.user_id)

        if request.banned:
            if user_id == admin.id:
                raise NotAuthorizedError("You cannot ban yourself")
            user = await self.user_service.ban_user(user_id)
        else:
            user = await self.user_service.unban_user(user_id)

        return UserResponse.from_user(user)
