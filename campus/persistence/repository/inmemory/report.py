"""In-memory report repository for testing."""

from typing import Optional
from uuid import UUID

from campus.domain.error import ConcurrentUpdateError
from campus.domain.model.report import Report
from campus.domain.repository.report import ReportRepository
from campus.domain.value import ReportId, ReportStatus, UserId

from .store import InMemoryStore


class InMemoryReportRepository(ReportRepository):
    """In-memory implementation of ReportRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        """Find a report by ID."""
        return self.store.reports.get(report_id)

    async def find_by_content_and_reporter(
        self, content_id: UUID, reporter_id: UserId
    ) -> list[Report]:
        """Find a reporter's reports on a content item."""
        return [
            r
            for r in self.store.reports.values()
            if r.content_id == content_id and r.reporter_id == reporter_id
        ]

    async def find_all(self) -> list[Report]:
        """Find all reports, newest first."""
        return sorted(
            self.store.reports.values(), key=lambda r: r.created_at, reverse=True
        )

    async def create(self, report: Report) -> Report:
        """Insert a new report."""
        if await self.find_by_content_and_reporter(
            report.content_id, report.reporter_id
        ):
            raise ConcurrentUpdateError("report", str(report.content_id))
        self.store.reports[report.id] = report
        return report

    async def update_status(
        self, report_id: ReportId, status: ReportStatus
    ) -> Optional[Report]:
        """Set a report's status."""
        report = self.store.reports.get(report_id)
        if report is None:
            return None
        updated = report.model_copy(update={"status": status})
        self.store.reports[report_id] = updated
        return updated

    async def delete(self, report_id: ReportId) -> bool:
        """Delete a report."""
        return self.store.reports.pop(report_id, None) is not None
