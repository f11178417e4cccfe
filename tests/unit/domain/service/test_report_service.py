"""Unit tests for ReportService."""

from uuid import uuid4

import pytest

from campus.domain.error import (
    DuplicateReportError,
    MissingReasonError,
    NotFoundError,
    SelfReportError,
    StoreUnavailableError,
    UnauthenticatedError,
)
from campus.domain.model import SUSPENSION_THRESHOLD, Comment
from campus.domain.repository import CommentRepository, PostRepository, ReportRepository
from campus.domain.service import ReportService
from campus.domain.value import (
    AuthorSnapshot,
    ContentType,
    PostId,
    ReportCategory,
    ReportId,
    ReportStatus,
    UserId,
)
from campus.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryReportRepository,
    InMemoryStore,
    InMemoryTransactionManager,
)
from tests.conftest import FlakyPostRepository, make_post, save_post
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()

OWNER = UserId("idp|author")


async def _report_post(service: ReportService, post_id, reporter: str, **kwargs):
    return await service.file_report(
        content_id=post_id,
        content_type=ContentType.POST,
        content_owner_id=OWNER,
        reporter_id=UserId(reporter),
        category=kwargs.pop("category", ReportCategory.SPAM),
        **kwargs,
    )


class TestFileReport:
    """Tests for file_report."""

    @pytest.mark.asyncio
    async def test_report_is_pending_and_counted(self, unit_env):
        """A report should be stored pending and bump the post's count."""
        # Arrange
        report_service = await unit_env.get(ReportService)
        post_repo = await unit_env.get(PostRepository)
        post = await save_post(post_repo, author_id=OWNER)

        # Act
        report = await _report_post(report_service, post.id, "idp|r1")

        # Assert
        assert report.status == ReportStatus.PENDING
        assert report.content_owner_id == OWNER
        stored = await post_repo.find_by_id(post.id)
        assert stored.report_count == 1
        assert stored.is_suspended is False

    @pytest.mark.asyncio
    async def test_fifth_distinct_report_suspends_post(self, unit_env):
        """A post with four reports should be suspended by the fifth."""
        report_service = await unit_env.get(ReportService)
        post_repo = await unit_env.get(PostRepository)
        post = await save_post(post_repo, author_id=OWNER)

        for i in range(SUSPENSION_THRESHOLD - 1):
            await _report_post(report_service, post.id, f"idp|r{i}")
        assert (await post_repo.find_by_id(post.id)).is_suspended is False

        await _report_post(report_service, post.id, "idp|last")

        stored = await post_repo.find_by_id(post.id)
        assert stored.report_count == SUSPENSION_THRESHOLD
        assert stored.is_suspended is True

    @pytest.mark.asyncio
    async def test_duplicate_report_rejected_without_counting(self, unit_env):
        """A reporter may report an item only once."""
        report_service = await unit_env.get(ReportService)
        post_repo = await unit_env.get(PostRepository)
        post = await save_post(post_repo, author_id=OWNER)
        await _report_post(report_service, post.id, "idp|r1")

        with pytest.raises(DuplicateReportError):
            await _report_post(report_service, post.id, "idp|r1")

        assert (await post_repo.find_by_id(post.id)).report_count == 1

    @pytest.mark.asyncio
    async def test_repeated_reports_by_one_user_never_suspend(self, unit_env):
        """Only distinct reporters count toward the threshold."""
        report_service = await unit_env.get(ReportService)
        post_repo = await unit_env.get(PostRepository)
        post = await save_post(post_repo, author_id=OWNER)
        await _report_post(report_service, post.id, "idp|r1")

        for _ in range(SUSPENSION_THRESHOLD):
            with pytest.raises(DuplicateReportError):
                await _report_post(report_service, post.id, "idp|r1")

        assert (await post_repo.find_by_id(post.id)).is_suspended is False

    @pytest.mark.asyncio
    async def test_self_report_rejected(self, unit_env):
        """Authors cannot report their own content."""
        report_service = await unit_env.get(ReportService)
        post = await save_post(await unit_env.get(PostRepository), author_id=OWNER)

        with pytest.raises(SelfReportError, match="your own post"):
            await _report_post(report_service, post.id, OWNER)

    @pytest.mark.asyncio
    async def test_other_category_requires_reason(self, unit_env):
        """Choosing 'other' without a reason should be rejected."""
        report_service = await unit_env.get(ReportService)
        post = await save_post(await unit_env.get(PostRepository), author_id=OWNER)

        with pytest.raises(MissingReasonError):
            await _report_post(
                report_service,
                post.id,
                "idp|r1",
                category=ReportCategory.OTHER,
                reason="   ",
            )

        report = await _report_post(
            report_service,
            post.id,
            "idp|r1",
            category=ReportCategory.OTHER,
            reason=" Doxxing a classmate ",
        )
        assert report.reason == "Doxxing a classmate"

    @pytest.mark.asyncio
    async def test_anonymous_report_rejected(self, unit_env):
        """Reporting without a principal should be rejected."""
        report_service = await unit_env.get(ReportService)
        post = await save_post(await unit_env.get(PostRepository), author_id=OWNER)

        with pytest.raises(UnauthenticatedError):
            await report_service.file_report(
                post.id, ContentType.POST, OWNER, None, ReportCategory.SPAM
            )

    @pytest.mark.asyncio
    async def test_comment_reports_never_suspend(self, unit_env):
        """Reports on comments are recorded but do not escalate."""
        report_service = await unit_env.get(ReportService)
        report_repo = await unit_env.get(ReportRepository)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        post = await save_post(post_repo, author_id=OWNER)
        commenter = UserId("idp|commenter")
        comment = await comment_repo.create(
            Comment(
                post_id=post.id,
                author_id=commenter,
                author=AuthorSnapshot(id=commenter, display_name="Commenter"),
                text="Rude remark",
            )
        )

        for i in range(SUSPENSION_THRESHOLD):
            await report_service.file_report(
                comment.id,
                ContentType.COMMENT,
                commenter,
                UserId(f"idp|r{i}"),
                ReportCategory.BULLYING_HARASSMENT,
            )

        assert len(await report_repo.find_all()) == SUSPENSION_THRESHOLD
        stored_post = await post_repo.find_by_id(post.id)
        assert stored_post.report_count == 0
        assert stored_post.is_suspended is False


class TestResolveContentOwner:
    """Tests for resolve_content_owner."""

    @pytest.mark.asyncio
    async def test_resolves_post_author(self, unit_env):
        """The owner of a post is its author."""
        report_service = await unit_env.get(ReportService)
        post = await save_post(await unit_env.get(PostRepository), author_id=OWNER)

        owner = await report_service.resolve_content_owner(ContentType.POST, post.id)

        assert owner == OWNER

    @pytest.mark.asyncio
    async def test_missing_content_not_found(self, unit_env):
        """Unknown content should raise NotFoundError."""
        report_service = await unit_env.get(ReportService)

        with pytest.raises(NotFoundError):
            await report_service.resolve_content_owner(
                ContentType.COMMENT, PostId(uuid4())
            )


class TestModeration:
    """Tests for report moderation operations."""

    @pytest.mark.asyncio
    async def test_update_status(self, unit_env):
        """An administrator can move a report to reviewed."""
        report_service = await unit_env.get(ReportService)
        post = await save_post(await unit_env.get(PostRepository), author_id=OWNER)
        report = await _report_post(report_service, post.id, "idp|r1")

        updated = await report_service.update_status(report.id, ReportStatus.REVIEWED)

        assert updated.status == ReportStatus.REVIEWED

    @pytest.mark.asyncio
    async def test_dismiss_keeps_post_counters(self, unit_env):
        """Dismissing a report should not unsuspend or uncount the post."""
        report_service = await unit_env.get(ReportService)
        post_repo = await unit_env.get(PostRepository)
        post = await save_post(post_repo, author_id=OWNER)
        report = await _report_post(report_service, post.id, "idp|r1")

        await report_service.dismiss_report(report.id)

        assert await report_service.list_reports() == []
        assert (await post_repo.find_by_id(post.id)).report_count == 1

    @pytest.mark.asyncio
    async def test_unknown_report_not_found(self, unit_env):
        """Dismissing or updating an unknown report should raise NotFoundError."""
        report_service = await unit_env.get(ReportService)

        with pytest.raises(NotFoundError):
            await report_service.dismiss_report(ReportId(uuid4()))
        with pytest.raises(NotFoundError):
            await report_service.update_status(ReportId(uuid4()), ReportStatus.RESOLVED)


class TestFileReportAtomicity:
    """A report and its post counter are written together or not at all."""

    @staticmethod
    async def _service(failures: int, error=None):
        store = InMemoryStore()
        post_repo = FlakyPostRepository(store, failures, error)
        post = await post_repo.create(make_post(author_id=OWNER))
        report_repo = InMemoryReportRepository(store)
        service = ReportService(
            report_repository=report_repo,
            post_repository=post_repo,
            comment_repository=InMemoryCommentRepository(store),
            transaction=InMemoryTransactionManager(store),
            max_attempts=3,
        )
        return service, report_repo, post_repo, post

    @pytest.mark.asyncio
    async def test_failed_counter_write_leaves_no_report(self):
        """A store failure on the post write should roll the report back."""
        service, report_repo, post_repo, post = await self._service(
            failures=1, error=lambda _: StoreUnavailableError()
        )

        with pytest.raises(StoreUnavailableError):
            await _report_post(service, post.id, "idp|r1")

        assert await report_repo.find_all() == []
        assert (await post_repo.find_by_id(post.id)).report_count == 0

    @pytest.mark.asyncio
    async def test_losing_every_retry_leaves_counts_unchanged(self):
        """Exhausted retries should leave neither a report nor a count."""
        service, report_repo, post_repo, post = await self._service(failures=10)

        with pytest.raises(StoreUnavailableError):
            await _report_post(service, post.id, "idp|r1")

        assert await report_repo.find_all() == []
        stored = await post_repo.find_by_id(post.id)
        assert (stored.report_count, stored.is_suspended) == (0, False)
        assert stored.version == post.version
        assert post_repo.update_calls == 3

    @pytest.mark.asyncio
    async def test_retried_report_is_not_a_duplicate(self):
        """A report retried after a lost race should be stored once."""
        service, report_repo, post_repo, post = await self._service(failures=1)

        report = await _report_post(service, post.id, "idp|r1")

        assert [r.id for r in await report_repo.find_all()] == [report.id]
        assert (await post_repo.find_by_id(post.id)).report_count == 1
