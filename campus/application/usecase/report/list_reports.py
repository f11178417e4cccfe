"""List reports use case."""

from pydantic import BaseModel

from campus.domain.service import ReportService, UserService
from campus.domain.value import Principal

from .file_report import ReportItem


class ListReportsRequest(BaseModel):
    """List reports request."""

    principal: Principal | None = None


class ListReportsResponse(BaseModel):
    """List reports response."""

    reports: list[ReportItem]
    total: int


class ListReportsUseCase:
    """Use case for the moderators' report list, newest first."""

    def __init__(self, report_service: ReportService, user_service: UserService) -> None:
        self.report_service = report_service
        self.user_service = user_service

    async def execute(self, request: ListReportsRequest) -> ListReportsResponse:
        """Execute list reports flow.

        Raises:
            UnauthenticatedError: If the caller is anonymous
            NotAuthorizedError: If the caller is not an administrator
        """
        await self.user_service.require_admin(request.principal)
        reports = await self.report_service.list_reports()
        return ListReportsResponse(
            reports=[ReportItem.from_report(r) for r in reports], total=len(reports)
        )
