"""Report repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from campus.domain.model.report import Report
from campus.domain.value import ReportId, ReportStatus, UserId


class ReportRepository(ABC):
    """Repository for Report entity."""

    @abstractmethod
    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        """Find a report by ID.

        Args:
            report_id: The report's unique identifier

        Returns:
            The report if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_content_and_reporter(
        self, content_id: UUID, reporter_id: UserId
    ) -> List[Report]:
        """Find a reporter's reports on a content item.

        Args:
            content_id: The reported post or comment ID
            reporter_id: The reporter's user ID

        Returns:
            Matching reports (at most one when the invariant holds)
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Report]:
        """Find all reports, newest first.

        Returns:
            List of reports
        """
        pass

    @abstractmethod
    async def create(self, report: Report) -> Report:
        """Insert a new report.

        Args:
            report: The report to insert

        Returns:
            The saved report

        Raises:
            ConcurrentUpdateError: If the same reporter's report was inserted concurrently
        """
        pass

    @abstractmethod
    async def update_status(
        self, report_id: ReportId, status: ReportStatus
    ) -> Optional[Report]:
        """Set a report's status.

        Args:
            report_id: The report ID
            status: New status

        Returns:
            Updated report, or None if it does not exist
        """
        pass

    @abstractmethod
    async def delete(self, report_id: ReportId) -> bool:
        """Delete a report.

        Args:
            report_id: The report ID

        Returns:
            True if a report was deleted, False if none existed
        """
        pass
