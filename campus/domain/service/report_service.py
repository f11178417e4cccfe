"""Report domain service."""

from uuid import UUID, uuid4

import logfire

from campus.domain.error import (
    DuplicateReportError,
    MissingReasonError,
    NotFoundError,
    SelfReportError,
    UnauthenticatedError,
)
from campus.domain.model.report import Report
from campus.domain.repository import (
    CommentRepository,
    PostRepository,
    ReportRepository,
    TransactionManager,
)
from campus.domain.value import (
    CommentId,
    ContentType,
    PostId,
    ReportCategory,
    ReportId,
    ReportStatus,
    UserId,
)

from .base import TransactionalService


class ReportService(TransactionalService):
    """Domain service for abuse reports and report escalation.

    A report on a post bumps the post's report count in the same atomic
    scope as the report insert; the post is suspended once the count
    reaches ``SUSPENSION_THRESHOLD``. Reports on comments are recorded but
    never escalate.
    """

    def __init__(
        self,
        report_repository: ReportRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        transaction: TransactionManager,
        max_attempts: int = 3,
    ) -> None:
        """Initialize report service.

        Args:
            report_repository: Report repository
            post_repository: Post repository
            comment_repository: Comment repository
            transaction: Transaction manager
            max_attempts: Attempts per report before giving up on conflicts
        """
        super().__init__(transaction, max_attempts)
        self.report_repository = report_repository
        self.post_repository = post_repository
        self.comment_repository = comment_repository

    async def resolve_content_owner(
        self, content_type: ContentType, content_id: UUID
    ) -> UserId:
        """Look up who owns a post or comment.

        Args:
            content_type: Post or comment
            content_id: Post ID or comment ID

        Returns:
            The author's user ID

        Raises:
            NotFoundError: If the content does not exist
        """
        if content_type == ContentType.POST:
            post = await self.post_repository.find_by_id(PostId(content_id))
            if post is not None:
                return post.author_id
        else:
            comment = await self.comment_repository.find_by_id(CommentId(content_id))
            if comment is not None:
                return comment.author_id

        raise NotFoundError(content_type.value.capitalize(), str(content_id))

    async def file_report(
        self,
        content_id: UUID,
        content_type: ContentType,
        content_owner_id: UserId,
        reporter_id: UserId | None,
        category: ReportCategory,
        reason: str | None = None,
    ) -> Report:
        """File an abuse report.

        Args:
            content_id: Reported post or comment ID
            content_type: Post or comment
            content_owner_id: Author of the reported content
            reporter_id: Reporter, None if the caller is anonymous
            category: Abuse category
            reason: Free-text reason, required for ``other``

        Returns:
            The pending report

        Raises:
            UnauthenticatedError: If there is no reporter
            SelfReportError: If the reporter owns the content
            MissingReasonError: If ``other`` is chosen without a reason
            DuplicateReportError: If the reporter already reported the content
            NotFoundError: If the reported post no longer exists
        """
        if reporter_id is None:
            raise UnauthenticatedError("report content")
        if reporter_id == content_owner_id:
            raise SelfReportError(content_type.value)

        reason = reason.strip() if reason else None
        if category.requires_reason and not reason:
            raise MissingReasonError()

        async def apply() -> Report:
            existing = await self.report_repository.find_by_content_and_reporter(
                content_id, reporter_id
            )
            if existing:
                logfire.warn(
                    "Duplicate report attempt",
                    content_id=str(content_id),
                    reporter_id=reporter_id,
                )
                raise DuplicateReportError(str(content_id), reporter_id)

            report = await self.report_repository.create(
                Report(
                    id=ReportId(uuid4()),
                    content_id=content_id,
                    content_type=content_type,
                    content_owner_id=content_owner_id,
                    reporter_id=reporter_id,
                    category=category,
                    reason=reason or None,
                )
            )

            if content_type == ContentType.POST:
                await self._escalate_post(PostId(content_id))
            return report

        with logfire.span(
            "report_service.file_report",
            content_id=str(content_id),
            content_type=content_type.value,
            reporter_id=reporter_id,
            category=category.value,
        ):
            report = await self.run_atomic("file_report", apply)
            logfire.info(
                "Report filed",
                report_id=str(report.id),
                content_id=str(content_id),
                category=category.value,
            )
            return report

    async def dismiss_report(self, report_id: ReportId) -> None:
        """Delete a report without touching the reported content.

        Args:
            report_id: Report ID

        Raises:
            NotFoundError: If the report does not exist
        """
        with logfire.span("report_service.dismiss_report", report_id=str(report_id)):
            if not await self.report_repository.delete(report_id):
                logfire.warn("Report to dismiss not found", report_id=str(report_id))
                raise NotFoundError("Report", str(report_id))
            logfire.info("Report dismissed", report_id=str(report_id))

    async def update_status(self, report_id: ReportId, status: ReportStatus) -> Report:
        """Move a report to a new moderation status.

        Raises:
            NotFoundError: If the report does not exist
        """
        with logfire.span(
            "report_service.update_status",
            report_id=str(report_id),
            status=status.value,
        ):
            report = await self.report_repository.update_status(report_id, status)
            if report is None:
                raise NotFoundError("Report", str(report_id))
            return report

    async def list_reports(self) -> list[Report]:
        """List every report, newest first."""
        with logfire.span("report_service.list_reports"):
            reports = await self.report_repository.find_all()
            logfire.info("Reports listed", count=len(reports))
            return reports

    async def _escalate_post(self, post_id: PostId) -> None:
        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            raise NotFoundError("Post", str(post_id))

        escalated = post.with_report()
        await self.post_repository.update(escalated, expected_version=post.version)

        if escalated.is_suspended and not post.is_suspended:
            logfire.warn(
                "Post suspended after reports",
                post_id=str(post_id),
                report_count=escalated.report_count,
            )
