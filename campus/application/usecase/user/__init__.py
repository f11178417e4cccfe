"""User use cases."""

from .ban_user import BanUserRequest, BanUserUseCase
from .find_user_by_email import (
    FindUserByEmailRequest,
    FindUserByEmailResponse,
    FindUserByEmailUseCase,
)
from .get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    UserResponse,
)
from .get_user_profile import (
    GetUserProfileRequest,
    GetUserProfileUseCase,
    UserProfileResponse,
)

__all__ = [
    "UserResponse",
    "BanUserRequest",
    "BanUserUseCase",
    "FindUserByEmailRequest",
    "FindUserByEmailResponse",
    "FindUserByEmailUseCase",
    "GetCurrentUserRequest",
    "GetCurrentUserUseCase",
    "GetUserProfileRequest",
    "GetUserProfileUseCase",
    "UserProfileResponse",
]
