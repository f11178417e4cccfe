"""Update report status use case."""

from uuid import UUID

from pydantic import BaseModel

from campus.domain.service import ReportService, UserService
from campus.domain.value import Principal, ReportId, ReportStatus

from .file_report import ReportItem


class UpdateReportStatusRequest(BaseModel):
    """Update report status request."""

    report_id: str  # UUID string
    status: ReportStatus
    principal: Principal | None = None


class UpdateReportStatusUseCase:
    """Use case for marking a report reviewed or resolved."""

    def __init__(self, report_service: ReportService, user_service: UserService) -> None:
        self.report_service = report_service
        self.user_service = user_service

    async def execute(self, request: UpdateReportStatusRequest) -> ReportItem:
        """Execute update report status flow.

        Raises:
            UnauthenticatedError: If the caller is anonymous
            NotAuthorizedError: If the caller is not an administrator
            NotFoundError: If the report does not exist
        """
        await self.user_service.require_admin(request.principal)
        report = await self.report_service.update_status(
            ReportId(UUID(request.report_id)), request.status
        )
        return ReportItem.from_report(report)
