"""User and account routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from campus.application.usecase.user import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    GetUserProfileRequest,
    GetUserProfileUseCase,
    UserProfileResponse,
    UserResponse,
)
from campus.domain.service import JWTService

router = APIRouter(tags=["users"], route_class=DishkaRoute)


@router.get("/auth/me", response_model=UserResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UserResponse:
    """Get the signed-in user's account.

    The account is registered the first time a principal is seen.

    Args:
        get_current_user_use_case: Get current user use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        The caller's account
    """
    principal = jwt_service.get_principal_from_token(auth_token)
    return await get_current_user_use_case.execute(
        GetCurrentUserRequest(principal=principal)
    )


@router.get("/users/{user_id}", response_model=UserProfileResponse)
async def get_user_profile(
    user_id: str,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> UserProfileResponse:
    """Get a user's public profile with their posts and comments."""
    return await get_user_profile_use_case.execute(
        GetUserProfileRequest(user_id=user_id)
    )
