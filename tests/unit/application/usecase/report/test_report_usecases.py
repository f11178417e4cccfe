"""Unit tests for report use cases."""

from uuid import uuid4

import pytest

from campus.application.usecase.report import (
    DismissReportRequest,
    DismissReportUseCase,
    FileReportRequest,
    FileReportUseCase,
    ListReportsRequest,
    ListReportsUseCase,
    UpdateReportStatusRequest,
    UpdateReportStatusUseCase,
)
from campus.domain.error import (
    NotAuthorizedError,
    NotFoundError,
    SelfReportError,
    UnauthenticatedError,
)
from campus.domain.repository import PostRepository
from campus.domain.value import ContentType, ReportCategory, ReportStatus
from tests.conftest import make_principal, save_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

AUTHOR = make_principal("idp|author")
REPORTER = make_principal("idp|reporter")


async def _file(unit_env, content_id: str, principal=REPORTER, **kwargs):
    use_case = await unit_env.get(FileReportUseCase)
    return await use_case.execute(
        FileReportRequest(
            content_id=content_id,
            content_type=kwargs.pop("content_type", ContentType.POST),
            category=kwargs.pop("category", ReportCategory.MISINFORMATION),
            principal=principal,
            **kwargs,
        )
    )


class TestFileReportUseCase:
    """Tests for FileReportUseCase."""

    @pytest.mark.asyncio
    async def test_owner_resolved_from_content(self, unit_env):
        """The content owner should be looked up, not supplied by the caller."""
        post = await save_post(await unit_env.get(PostRepository), author_id=AUTHOR.id)

        item = await _file(unit_env, str(post.id))

        assert item.content_owner_id == AUTHOR.id
        assert item.reporter_id == REPORTER.id
        assert item.status == ReportStatus.PENDING

    @pytest.mark.asyncio
    async def test_self_report_rejected(self, unit_env):
        """Authors cannot report their own post."""
        post = await save_post(await unit_env.get(PostRepository), author_id=AUTHOR.id)

        with pytest.raises(SelfReportError):
            await _file(unit_env, str(post.id), principal=AUTHOR)

    @pytest.mark.asyncio
    async def test_report_missing_content_not_found(self, unit_env):
        """Reporting content that does not exist should raise NotFoundError."""
        with pytest.raises(NotFoundError):
            await _file(unit_env, str(uuid4()), content_type=ContentType.COMMENT)

    @pytest.mark.asyncio
    async def test_anonymous_report_rejected(self, unit_env):
        """Anonymous callers cannot report."""
        post = await save_post(await unit_env.get(PostRepository))

        with pytest.raises(UnauthenticatedError):
            await _file(unit_env, str(post.id), principal=None)


class TestReportModeration:
    """Tests for the administrator report workflow."""

    @pytest.mark.asyncio
    async def test_admin_lists_updates_and_dismisses(self, unit_env, admin_email):
        """Administrators can review and dismiss reports."""
        admin = make_principal("idp|admin", email=admin_email)
        post = await save_post(await unit_env.get(PostRepository), author_id=AUTHOR.id)
        filed = await _file(unit_env, str(post.id))
        list_reports = await unit_env.get(ListReportsUseCase)
        update_status = await unit_env.get(UpdateReportStatusUseCase)
        dismiss = await unit_env.get(DismissReportUseCase)

        listed = await list_reports.execute(ListReportsRequest(principal=admin))
        assert listed.total == 1
        assert listed.reports[0].report_id == filed.report_id

        reviewed = await update_status.execute(
            UpdateReportStatusRequest(
                report_id=filed.report_id,
                status=ReportStatus.RESOLVED,
                principal=admin,
            )
        )
        assert reviewed.status == ReportStatus.RESOLVED

        dismissed = await dismiss.execute(
            DismissReportRequest(report_id=filed.report_id, principal=admin)
        )
        assert dismissed.dismissed is True
        assert (await list_reports.execute(ListReportsRequest(principal=admin))).total == 0

    @pytest.mark.asyncio
    async def test_students_cannot_moderate(self, unit_env):
        """Non-admins are refused every moderation operation."""
        student = make_principal("idp|student")
        list_reports = await unit_env.get(ListReportsUseCase)
        dismiss = await unit_env.get(DismissReportUseCase)

        with pytest.raises(NotAuthorizedError):
            await list_reports.execute(ListReportsRequest(principal=student))
        with pytest.raises(NotAuthorizedError):
            await dismiss.execute(
                DismissReportRequest(report_id=str(uuid4()), principal=student)
            )
