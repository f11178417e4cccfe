"""End-to-end tests for reports, suspension and administrator tools."""

import pytest
from fastapi.testclient import TestClient

from campus.domain.model import SUSPENSION_THRESHOLD
from campus.interface.api.app import create_app
from tests.di import build_test_container
from tests.conftest import auth_cookie


@pytest.fixture
def client(admin_email):
    """Create test client with test container and one administrator email."""
    app_instance = create_app(build_test_container())
    return TestClient(app_instance)


@pytest.fixture
def admin_cookie(admin_email):
    """Cookie for the configured administrator."""
    return auth_cookie("dean", "Dean of Students", email=admin_email)


def _create_post(client, user_id="author-1"):
    response = client.post(
        "/posts",
        json={"title": "Selling exam answers", "category": "Other", "text": "DM me"},
        cookies=auth_cookie(user_id),
    )
    assert response.status_code == 201
    return response.json()


def _report(client, content_id, reporter, **overrides):
    body = {
        "content_type": "post",
        "content_id": content_id,
        "category": "spam",
    } | overrides
    return client.post("/reports", json=body, cookies=auth_cookie(reporter))


class TestReports:
    """End-to-end tests for filing reports."""

    def test_fifth_report_suspends_post(self, client):
        """Five distinct reporters should suspend the post."""
        post = _create_post(client)

        for i in range(SUSPENSION_THRESHOLD - 1):
            assert _report(client, post["post_id"], f"reporter-{i}").status_code == 201
        assert client.get(f"/posts/{post['post_id']}").json()["is_suspended"] is False

        last = _report(client, post["post_id"], "reporter-last")

        assert last.status_code == 201
        assert last.json()["status"] == "pending"
        # Hidden from everyone but the author and administrators
        assert client.get(f"/posts/{post['post_id']}").status_code == 404
        assert client.get("/posts").json()["posts"] == []
        own_view = client.get(
            f"/posts/{post['post_id']}", cookies=auth_cookie("author-1")
        )
        assert own_view.json()["is_suspended"] is True

    def test_suspended_post_closed_to_strangers(self, client, admin_cookie):
        """Comments and votes on a suspended post are hidden from strangers."""
        post = _create_post(client)
        for i in range(SUSPENSION_THRESHOLD):
            _report(client, post["post_id"], f"reporter-{i}")
        url = f"/posts/{post['post_id']}"
        stranger = auth_cookie("stranger")

        listed = client.get(f"{url}/comments", cookies=stranger)
        commented = client.post(
            f"{url}/comments", json={"text": "Still here?"}, cookies=stranger
        )
        voted = client.post(f"{url}/vote", json={"vote_type": "up"}, cookies=stranger)
        by_author = client.get(f"{url}/comments", cookies=auth_cookie("author-1"))
        by_admin = client.get(f"{url}/comments", cookies=admin_cookie)

        assert listed.status_code == 404
        assert commented.status_code == 404
        assert voted.status_code == 404
        assert by_author.status_code == 200
        assert by_admin.status_code == 200
        assert by_admin.json()["total"] == 0

    def test_duplicate_report_conflict(self, client):
        """A second report by the same student should return 409."""
        post = _create_post(client)
        _report(client, post["post_id"], "reporter-1")

        response = _report(client, post["post_id"], "reporter-1")

        assert response.status_code == 409
        assert response.json()["error"] == "duplicate_report"

    def test_self_report_conflict(self, client):
        """Authors cannot report their own post."""
        post = _create_post(client)

        response = _report(client, post["post_id"], "author-1")

        assert response.status_code == 409
        assert response.json()["error"] == "self_report"

    def test_other_requires_reason(self, client):
        """The 'other' category needs a reason."""
        post = _create_post(client)

        missing = _report(client, post["post_id"], "reporter-1", category="other")
        given = _report(
            client,
            post["post_id"],
            "reporter-1",
            category="other",
            reason="Academic dishonesty",
        )

        assert missing.status_code == 422
        assert missing.json()["error"] == "missing_reason"
        assert given.status_code == 201
        assert given.json()["reason"] == "Academic dishonesty"

    def test_report_without_auth_fails(self, client):
        """Anonymous reports should return 401."""
        post = _create_post(client)

        response = client.post(
            "/reports",
            json={"content_type": "post", "content_id": post["post_id"], "category": "spam"},
        )

        assert response.status_code == 401


class TestAdminEndpoints:
    """End-to-end tests for administrator endpoints."""

    def test_admin_reviews_suspended_posts(self, client, admin_cookie):
        """Administrators see suspended posts and reports."""
        post = _create_post(client)
        for i in range(SUSPENSION_THRESHOLD):
            _report(client, post["post_id"], f"reporter-{i}")

        suspended = client.get("/admin/posts/suspended", cookies=admin_cookie)
        reports = client.get("/admin/reports", cookies=admin_cookie)
        feed = client.get("/posts", cookies=admin_cookie)

        assert suspended.status_code == 200
        assert suspended.json()["total"] == 1
        assert reports.json()["total"] == SUSPENSION_THRESHOLD
        assert [p["post_id"] for p in feed.json()["posts"]] == [post["post_id"]]

    def test_update_and_dismiss_report(self, client, admin_cookie):
        """Administrators can resolve and dismiss reports."""
        post = _create_post(client)
        report = _report(client, post["post_id"], "reporter-1").json()
        url = f"/admin/reports/{report['report_id']}"

        resolved = client.patch(url, json={"status": "resolved"}, cookies=admin_cookie)
        dismissed = client.delete(url, cookies=admin_cookie)
        again = client.delete(url, cookies=admin_cookie)

        assert resolved.json()["status"] == "resolved"
        assert dismissed.json()["dismissed"] is True
        assert again.status_code == 404

    def test_students_forbidden(self, client):
        """Non-admins get 403 from administrator endpoints."""
        cookies = auth_cookie("student")

        assert client.get("/admin/reports", cookies=cookies).status_code == 403
        assert client.get("/admin/posts/suspended", cookies=cookies).status_code == 403

    def test_find_user_by_email(self, client, admin_cookie):
        """Administrators look up a student by email and see their activity."""
        post = _create_post(client)
        for i in range(SUSPENSION_THRESHOLD):
            _report(client, post["post_id"], f"reporter-{i}")

        found = client.get(
            "/admin/users",
            params={"email": "AUTHOR-1@students.example.edu"},
            cookies=admin_cookie,
        )
        missing = client.get(
            "/admin/users",
            params={"email": "nobody@students.example.edu"},
            cookies=admin_cookie,
        )
        student = client.get(
            "/admin/users",
            params={"email": "author-1@students.example.edu"},
            cookies=auth_cookie("student"),
        )

        assert found.status_code == 200
        assert found.json()["account"]["user_id"] == "author-1"
        # Suspended posts stay visible to moderators
        assert [p["post_id"] for p in found.json()["profile"]["posts"]] == [
            post["post_id"]
        ]
        assert missing.status_code == 404
        assert student.status_code == 403

    def test_ban_and_unban(self, client, admin_cookie):
        """A banned student cannot write until the ban is lifted."""
        post = _create_post(client)
        client.get("/auth/me", cookies=auth_cookie("troll"))

        banned = client.post("/admin/users/troll/ban", cookies=admin_cookie)
        blocked = client.post(
            f"/posts/{post['post_id']}/comments",
            json={"text": "Spam spam spam"},
            cookies=auth_cookie("troll"),
        )
        lifted = client.delete("/admin/users/troll/ban", cookies=admin_cookie)
        allowed = client.post(
            f"/posts/{post['post_id']}/comments",
            json={"text": "Sorry about that"},
            cookies=auth_cookie("troll"),
        )

        assert banned.json()["is_banned"] is True
        assert blocked.status_code == 403
        assert blocked.json()["error"] == "user_banned"
        assert lifted.json()["is_banned"] is False
        assert allowed.status_code == 201
