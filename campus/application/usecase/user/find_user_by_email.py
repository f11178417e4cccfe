"""Find user by email use case (administrators only)."""

from pydantic import BaseModel

from campus.domain.error import NotFoundError
from campus.domain.service import UserService
from campus.domain.value import Principal

from .get_current_user import UserResponse
from .get_user_profile import (
    GetUserProfileRequest,
    GetUserProfileUseCase,
    UserProfileResponse,
)


class FindUserByEmailRequest(BaseModel):
    """Find user by email request."""

    email: str
    principal: Principal | None = None


class FindUserByEmailResponse(BaseModel):
    """Account and activity of the user found."""

    account: UserResponse
    profile: UserProfileResponse


class FindUserByEmailUseCase:
    """Use case for looking up a user's account and activity by email."""

    def __init__(
        self,
        user_service: UserService,
        get_user_profile_use_case: GetUserProfileUseCase,
    ) -> None:
        """Initialize find user by email use case.

        Args:
            user_service: User domain service
            get_user_profile_use_case: Profile use case for the user's activity
        """
        self.user_service = user_service
        self.get_user_profile_use_case = get_user_profile_use_case

    async def execute(self, request: FindUserByEmailRequest) -> FindUserByEmailResponse:
        """Execute find user by email flow.

        The profile includes suspended posts so moderators see everything
        the user wrote.

        Args:
            request: Find user by email request

        Returns:
            The user's account and profile

        Raises:
            UnauthenticatedError: If the caller is anonymous
            NotAuthorizedError: If the caller is not an administrator
            NotFoundError: If no user has this email
        """
        await self.user_service.require_admin(request.principal)

        user = await self.user_service.get_user_by_email(request.email)
        if user is None:
            raise NotFoundError("User", request.email)

        profile = await self.get_user_profile_use_case.execute(
            GetUserProfileRequest(user_id=user.id, include_suspended=True)
        )
        return FindUserByEmailResponse(
            account=UserResponse.from_user(user), profile=profile
        )
