"""Moderation routes (administrators only)."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query
from pydantic import BaseModel

from campus.application.usecase.post import (
    ListSuspendedPostsRequest,
    ListSuspendedPostsResponse,
    ListSuspendedPostsUseCase,
)
from campus.application.usecase.report import (
    DismissReportRequest,
    DismissReportResponse,
    DismissReportUseCase,
    ListReportsRequest,
    ListReportsResponse,
    ListReportsUseCase,
    ReportItem,
    UpdateReportStatusRequest,
    UpdateReportStatusUseCase,
)
from campus.application.usecase.user import (
    BanUserRequest,
    BanUserUseCase,
    FindUserByEmailRequest,
    FindUserByEmailResponse,
    FindUserByEmailUseCase,
    UserResponse,
)
from campus.domain.service import JWTService
from campus.domain.value import ReportStatus

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


class UpdateReportStatusAPIRequest(BaseModel):
    """API request for moving a report to a new status."""

    status: ReportStatus


@router.get("/reports", response_model=ListReportsResponse)
async def list_reports(
    list_reports_use_case: FromDishka[ListReportsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListReportsResponse:
    """List every report, newest first."""
    return await list_reports_use_case.execute(
        ListReportsRequest(principal=jwt_service.get_principal_from_token(auth_token))
    )


@router.patch("/reports/{report_id}", response_model=ReportItem)
async def update_report_status(
    report_id: UUID,
    request: UpdateReportStatusAPIRequest,
    update_report_status_use_case: FromDishka[UpdateReportStatusUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ReportItem:
    """Mark a report reviewed or resolved."""
    return await update_report_status_use_case.execute(
        UpdateReportStatusRequest(
            report_id=str(report_id),
            status=request.status,
            principal=jwt_service.get_principal_from_token(auth_token),
        )
    )


@router.delete("/reports/{report_id}", response_model=DismissReportResponse)
async def dismiss_report(
    report_id: UUID,
    dismiss_report_use_case: FromDishka[DismissReportUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DismissReportResponse:
    """Dismiss a report without touching the reported content."""
    return await dismiss_report_use_case.execute(
        DismissReportRequest(
            report_id=str(report_id),
            principal=jwt_service.get_principal_from_token(auth_token),
        )
    )


@router.get("/posts/suspended", response_model=ListSuspendedPostsResponse)
async def list_suspended_posts(
    list_suspended_posts_use_case: FromDishka[ListSuspendedPostsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListSuspendedPostsResponse:
    """List posts suspended by reports."""
    return await list_suspended_posts_use_case.execute(
        ListSuspendedPostsRequest(
            principal=jwt_service.get_principal_from_token(auth_token)
        )
    )


@router.get("/users", response_model=FindUserByEmailResponse)
async def find_user_by_email(
    find_user_by_email_use_case: FromDishka[FindUserByEmailUseCase],
    jwt_service: FromDishka[JWTService],
    email: str = Query(min_length=3, max_length=255),
    auth_token: str | None = Cookie(default=None),
) -> FindUserByEmailResponse:
    """Look up a user by email with their posts and comments.

    Suspended posts are included.
    """
    return await find_user_by_email_use_case.execute(
        FindUserByEmailRequest(
            email=email,
            principal=jwt_service.get_principal_from_token(auth_token),
        )
    )


@router.post("/users/{user_id}/ban", response_model=UserResponse)
async def ban_user(
    user_id: str,
    ban_user_use_case: FromDishka[BanUserUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UserResponse:
    """Ban a user from writing to the forum."""
    return await ban_user_use_case.execute(
        BanUserRequest(
            user_id=user_id,
            banned=True,
            principal=jwt_service.get_principal_from_token(auth_token),
        )
    )


@router.delete("/users/{user_id}/ban", response_model=UserResponse)
async def unban_user(
    user_id: str,
    ban_user_use_case: FromDishka[BanUserUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UserResponse:
    """Lift a user's ban."""
    return await ban_user_use_case.execute(
        BanUserRequest(
            user_id=user_id,
            banned=False,
            principal=jwt_service.get_principal_from_token(auth_token),
        )
    )
