"""Dismiss report use case."""

from uuid import UUID

from pydantic import BaseModel

from campus.domain.service import ReportService, UserService
from campus.domain.value import Principal, ReportId


class DismissReportRequest(BaseModel):
    """Dismiss report request."""

    report_id: str  # UUID string
    principal: Principal | None = None


class DismissReportResponse(BaseModel):
    """Dismiss report response."""

    report_id: str
    dismissed: bool


class DismissReportUseCase:
    """Use case for dismissing a report.

    The report is deleted; the reported content and its counters are left
    as they are.
    """

    def __init__(self, report_service: ReportService, user_service: UserService) -> None:
        self.report_service = report_service
        self.user_service = user_service

    async def execute(self, request: DismissReportRequest) -> DismissReportResponse:
        """Execute dismiss report flow.

        Raises:
            UnauthenticatedError: If the caller is anonymous
            NotAuthorizedError: If the caller is not an administrator
            NotFoundError: If the report does not exist
        """
        await self.user_service.require_admin(request.principal)
        await self.report_service.dismiss_report(ReportId(UUID(request.report_id)))
        return DismissReportResponse(report_id=request.report_id, dismissed=True)
