"""PostgreSQL implementation of Report repository."""

from typing import List, Optional
from uuid import UUID

import logfire
from sqlalchemy import delete, desc, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from campus.domain.model import Report
from campus.domain.repository import ReportRepository
from campus.domain.value import ReportId, ReportStatus, UserId
from campus.persistence.errors import store_errors
from campus.persistence.mappers import report_to_dict, row_to_report
from campus.persistence.tables import reports_table


class PostgresReportRepository(ReportRepository):
    """PostgreSQL implementation of ReportRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        """Find a report by ID."""
        stmt = select(reports_table).where(reports_table.c.id == report_id)
        with store_errors("report", report_id):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_report(row._asdict()) if row else None

    async def find_by_content_and_reporter(
        self, content_id: UUID, reporter_id: UserId
    ) -> List[Report]:
        """Find a reporter's reports on a content item."""
        stmt = select(reports_table).where(
            reports_table.c.content_id == content_id,
            reports_table.c.reporter_id == reporter_id,
        )
        with store_errors("report", content_id):
            result = await self.session.execute(stmt)
            return [row_to_report(row._asdict()) for row in result.fetchall()]

    async def find_all(self) -> List[Report]:
        """Find all reports, newest first."""
        stmt = select(reports_table).order_by(desc(reports_table.c.created_at))
        with store_errors("report"):
            result = await self.session.execute(stmt)
            return [row_to_report(row._asdict()) for row in result.fetchall()]

    async def create(self, report: Report) -> Report:
        """Insert a new report."""
        with logfire.span(
            "report_repository.create",
            report_id=str(report.id),
            content_id=str(report.content_id),
        ):
            stmt = reports_table.insert().values(**report_to_dict(report))
            with store_errors("report", report.content_id):
                await self.session.execute(stmt)
                await self.session.flush()
            return report

    async def update_status(
        self, report_id: ReportId, status: ReportStatus
    ) -> Optional[Report]:
        """Set a report's status."""
        stmt = (
            update(reports_table)
            .where(reports_table.c.id == report_id)
            .values(status=status.value)
            .returning(reports_table)
        )
        with store_errors("report", report_id):
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
        return row_to_report(row._asdict()) if row else None

    async def delete(self, report_id: ReportId) -> bool:
        """Delete a report."""
        stmt = delete(reports_table).where(reports_table.c.id == report_id)
        with store_errors("report", report_id):
            result = await self.session.execute(stmt)
            await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
