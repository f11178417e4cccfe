"""File report use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from campus.domain.model import Report
from campus.domain.service import ReportService, UserService
from campus.domain.value import ContentType, Principal, ReportCategory, ReportStatus


class ReportItem(BaseModel):
    """Report item in responses."""

    report_id: str
    content_id: str
    content_type: ContentType
    content_owner_id: str
    reporter_id: str
    category: ReportCategory
    reason: str | None
    status: ReportStatus
    created_at: datetime

    @classmethod
    def from_report(cls, report: Report) -> "ReportItem":
        """Build the response item for a report."""
        return cls(
            report_id=str(report.id),
            content_id=str(report.content_id),
            content_type=report.content_type,
            content_owner_id=report.content_owner_id,
            reporter_id=report.reporter_id,
            category=report.category,
            reason=report.reason,
            status=report.status,
            created_at=report.created_at,
        )


class FileReportRequest(BaseModel):
    """File report request."""

    content_id: str  # Post ID or comment ID
    content_type: ContentType
    category: ReportCategory
    reason: str | None = None
    principal: Principal | None = None


class FileReportUseCase:
    """Use case for reporting an abusive post or comment."""

    def __init__(self, report_service: ReportService, user_service: UserService) -> None:
        """Initialize file report use case.

        Args:
            report_service: Report domain service
            user_service: User domain service
        """
        self.report_service = report_service
        self.user_service = user_service

    async def execute(self, request: FileReportRequest) -> ReportItem:
        """Execute file report flow.

        Steps:
        1. Resolve the reporter (rejects anonymous and banned callers)
        2. Look up the content's owner
        3. File the report; a post reaching the threshold is suspended

        Args:
            request: File report request

        Returns:
            The pending report

        Raises:
            UnauthenticatedError: If the caller is anonymous
            NotFoundError: If the content does not exist
            SelfReportError: If the caller owns the content
            MissingReasonError: If ``other`` is chosen without a reason
            DuplicateReportError: If the caller already reported the content
        """
        user = await self.user_service.require_active_user(
            request.principal, "report content"
        )
        content_id = UUID(request.content_id)
        owner_id = await self.report_service.resolve_content_owner(
            request.content_type, content_id
        )

        report = await self.report_service.file_report(
            content_id=content_id,
            content_type=request.content_type,
            content_owner_id=owner_id,
            reporter_id=user.id,
            category=request.category,
            reason=request.reason,
        )
        return ReportItem.from_report(report)
