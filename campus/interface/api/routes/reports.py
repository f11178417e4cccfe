"""Report routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from campus.application.usecase.report import (
    FileReportRequest,
    FileReportUseCase,
    ReportItem,
)
from campus.domain.service import JWTService
from campus.domain.value import ContentType, ReportCategory

router = APIRouter(tags=["reports"], route_class=DishkaRoute)


class FileReportAPIRequest(BaseModel):
    """API request for reporting a post or comment."""

    content_type: ContentType
    content_id: UUID  # Post ID or comment ID
    category: ReportCategory
    reason: str | None = Field(default=None, max_length=1000)


@router.post("/reports", response_model=ReportItem, status_code=status.HTTP_201_CREATED)
async def file_report(
    request: FileReportAPIRequest,
    file_report_use_case: FromDishka[FileReportUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ReportItem:
    """Report an abusive post or comment.

    Requires authentication. A post is suspended once it collects five
    reports from distinct users.

    Args:
        request: Report details
        file_report_use_case: File report use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        The pending report
    """
    return await file_report_use_case.execute(
        FileReportRequest(
            content_id=str(request.content_id),
            content_type=request.content_type,
            category=request.category,
            reason=request.reason,
            principal=jwt_service.get_principal_from_token(auth_token),
        )
    )
