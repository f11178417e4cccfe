"""End-to-end tests for posting, commenting and voting."""

import pytest
from fastapi.testclient import TestClient

from campus.interface.api.app import create_app
from tests.conftest import auth_cookie
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app(build_test_container())
    return TestClient(app_instance)


def _create_post(client, user_id="author-1", **overrides):
    body = {
        "title": "Study group for Linear Algebra",
        "category": "Academics",
        "text": "Meeting Tuesdays in room 204.",
    } | overrides
    response = client.post("/posts", json=body, cookies=auth_cookie(user_id))
    assert response.status_code == 201
    return response.json()


class TestHealth:
    """Tests for the health endpoint."""

    def test_health(self, client):
        """Health check should report healthy."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestPostEndpoints:
    """End-to-end tests for post API endpoints."""

    def test_create_and_get_post(self, client):
        """A created post should be readable by anyone."""
        post = _create_post(client)

        response = client.get(f"/posts/{post['post_id']}")

        assert response.status_code == 200
        assert response.json()["title"] == "Study group for Linear Algebra"
        assert response.json()["author"]["id"] == "author-1"

    def test_create_post_without_auth_fails(self, client):
        """Should return 401 when not authenticated."""
        response = client.post(
            "/posts",
            json={"title": "Hi", "category": "Other", "text": "Hello"},
        )

        assert response.status_code == 401
        assert response.json()["error"] == "unauthenticated"

    def test_create_post_with_invalid_token_fails(self, client):
        """An invalid token counts as anonymous."""
        response = client.post(
            "/posts",
            json={"title": "Hi", "category": "Other", "text": "Hello"},
            cookies={"auth_token": "invalid-token"},
        )

        assert response.status_code == 401

    def test_create_post_without_content_fails(self, client):
        """A post needs text or an image."""
        response = client.post(
            "/posts",
            json={"title": "Empty", "category": "Other"},
            cookies=auth_cookie("author-1"),
        )

        assert response.status_code == 422

    def test_unknown_category_rejected(self, client):
        """Categories are a fixed set."""
        response = client.post(
            "/posts",
            json={"title": "Hi", "category": "Memes", "text": "Hello"},
            cookies=auth_cookie("author-1"),
        )

        assert response.status_code == 422

    def test_feed_lists_posts(self, client):
        """The feed should list every visible post."""
        first = _create_post(client, title="First")
        second = _create_post(client, title="Second")

        response = client.get("/posts", params={"limit": 10})

        assert response.status_code == 200
        ids = [p["post_id"] for p in response.json()["posts"]]
        assert set(ids) == {first["post_id"], second["post_id"]}
        assert response.json()["limit"] == 10

    def test_get_nonexistent_post(self, client):
        """Should return 404 for an unknown post."""
        response = client.get("/posts/00000000-0000-0000-0000-000000000000")

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    def test_malformed_post_id(self, client):
        """A post ID that is not a UUID fails validation."""
        response = client.get("/posts/not-a-uuid")

        assert response.status_code == 422

    def test_only_author_deletes_post(self, client):
        """Other students get 403; the author can delete."""
        post = _create_post(client)

        forbidden = client.delete(
            f"/posts/{post['post_id']}", cookies=auth_cookie("someone-else")
        )
        deleted = client.delete(
            f"/posts/{post['post_id']}", cookies=auth_cookie("author-1")
        )

        assert forbidden.status_code == 403
        assert deleted.status_code == 200
        assert client.get(f"/posts/{post['post_id']}").status_code == 404

    def test_feed_search_matches_title_or_text(self, client):
        """The search text should match titles and bodies, ignoring case."""
        by_title = _create_post(client, title="Lost CALCULUS notes")
        by_text = _create_post(
            client, title="Found something", text="Blue binder with calculus notes"
        )
        _create_post(client, title="Parking permits", text="Where do I apply?")

        response = client.get("/posts", params={"query": "Calculus"})

        assert response.status_code == 200
        ids = {p["post_id"] for p in response.json()["posts"]}
        assert ids == {by_title["post_id"], by_text["post_id"]}

    def test_author_edits_post(self, client):
        """The author can change the title and category; counters stay."""
        post = _create_post(client)
        client.post(
            f"/posts/{post['post_id']}/vote",
            json={"vote_type": "up"},
            cookies=auth_cookie("fan"),
        )

        response = client.patch(
            f"/posts/{post['post_id']}",
            json={"title": "Study group moved", "category": "Events"},
            cookies=auth_cookie("author-1"),
        )

        assert response.status_code == 200
        assert response.json()["title"] == "Study group moved"
        assert response.json()["category"] == "Events"
        assert response.json()["text"] == "Meeting Tuesdays in room 204."
        assert response.json()["upvotes"] == 1

    def test_edit_post_rules(self, client):
        """Only the author edits, and a post cannot lose both text and image."""
        post = _create_post(client)
        url = f"/posts/{post['post_id']}"

        forbidden = client.patch(
            url, json={"title": "Hijacked"}, cookies=auth_cookie("someone-else")
        )
        emptied = client.patch(url, json={"text": None}, cookies=auth_cookie("author-1"))
        anonymous = client.patch(url, json={"title": "Anonymous"})

        assert forbidden.status_code == 403
        assert emptied.status_code == 422
        assert emptied.json()["error"] == "validation_error"
        assert anonymous.status_code == 401
        assert client.get(url).json()["title"] == "Study group for Linear Algebra"


class TestCommentEndpoints:
    """End-to-end tests for comment API endpoints."""

    def test_one_comment_per_student(self, client):
        """A second comment on the same post should be rejected with 409."""
        post = _create_post(client)
        url = f"/posts/{post['post_id']}/comments"
        cookies = auth_cookie("alice")

        first = client.post(url, json={"text": "Count me in"}, cookies=cookies)
        second = client.post(url, json={"text": "Me again"}, cookies=cookies)

        assert first.status_code == 201
        assert second.status_code == 409
        assert second.json()["error"] == "duplicate_comment"
        assert "Edit your comment" in second.json()["detail"]

        listed = client.get(url).json()
        assert listed["total"] == 1
        assert client.get(f"/posts/{post['post_id']}").json()["comments_count"] == 1

    def test_edit_get_and_delete_comment(self, client):
        """Students can edit and delete their own comment."""
        post = _create_post(client)
        url = f"/posts/{post['post_id']}/comments"
        cookies = auth_cookie("alice")
        client.post(url, json={"text": "Typo hree"}, cookies=cookies)

        edited = client.patch(url, json={"text": "Typo here"}, cookies=cookies)
        fetched = client.get(f"{url}/alice")
        forbidden = client.delete(f"{url}/alice", cookies=auth_cookie("bob"))
        deleted = client.delete(f"{url}/alice", cookies=cookies)

        assert edited.status_code == 200
        assert edited.json()["edited_at"] is not None
        assert fetched.json()["text"] == "Typo here"
        assert forbidden.status_code == 403
        assert deleted.status_code == 200
        assert client.get(f"{url}/alice").status_code == 404

    def test_blank_comment_rejected(self, client):
        """Whitespace-only comments should be rejected."""
        post = _create_post(client)

        response = client.post(
            f"/posts/{post['post_id']}/comments",
            json={"text": "   "},
            cookies=auth_cookie("alice"),
        )

        assert response.status_code == 422

    def test_comment_on_missing_post(self, client):
        """Commenting on an unknown post should return 404."""
        response = client.post(
            "/posts/00000000-0000-0000-0000-000000000000/comments",
            json={"text": "Hello?"},
            cookies=auth_cookie("alice"),
        )

        assert response.status_code == 404


class TestVoteEndpoints:
    """End-to-end tests for vote API endpoints."""

    def test_vote_toggle_and_flip(self, client):
        """Down, up, up should flip then withdraw the vote."""
        post = _create_post(client)
        url = f"/posts/{post['post_id']}/vote"
        cookies = auth_cookie("voter")

        down = client.post(url, json={"vote_type": "down"}, cookies=cookies).json()
        up = client.post(url, json={"vote_type": "up"}, cookies=cookies).json()
        mine = client.get(url, cookies=cookies).json()
        withdrawn = client.post(url, json={"vote_type": "up"}, cookies=cookies).json()

        assert (down["upvotes"], down["downvotes"], down["user_vote"]) == (0, 1, "down")
        assert (up["upvotes"], up["downvotes"], up["user_vote"]) == (1, 0, "up")
        assert mine["vote_type"] == "up"
        assert (withdrawn["upvotes"], withdrawn["user_vote"]) == (0, None)

        stored = client.get(f"/posts/{post['post_id']}").json()
        assert (stored["upvotes"], stored["downvotes"]) == (0, 0)

    def test_vote_on_comment(self, client):
        """Comment votes are addressed by post and comment author."""
        post = _create_post(client)
        client.post(
            f"/posts/{post['post_id']}/comments",
            json={"text": "Great idea"},
            cookies=auth_cookie("alice"),
        )

        response = client.post(
            f"/posts/{post['post_id']}/comments/alice/vote",
            json={"vote_type": "up"},
            cookies=auth_cookie("voter"),
        )
        comments = client.get(
            f"/posts/{post['post_id']}/comments", cookies=auth_cookie("voter")
        ).json()

        assert response.status_code == 200
        assert response.json()["votable_type"] == "comment"
        assert comments["comments"][0]["upvotes"] == 1
        assert comments["comments"][0]["user_vote"] == "up"

    def test_vote_without_auth_fails(self, client):
        """Anonymous votes should return 401."""
        post = _create_post(client)

        response = client.post(
            f"/posts/{post['post_id']}/vote", json={"vote_type": "up"}
        )

        assert response.status_code == 401

    def test_invalid_vote_type_rejected(self, client):
        """Only up and down are valid polarities."""
        post = _create_post(client)

        response = client.post(
            f"/posts/{post['post_id']}/vote",
            json={"vote_type": "sideways"},
            cookies=auth_cookie("voter"),
        )

        assert response.status_code == 422


class TestAccountEndpoints:
    """End-to-end tests for account and profile endpoints."""

    def test_me_registers_user(self, client):
        """The first /auth/me call should register the caller."""
        response = client.get("/auth/me", cookies=auth_cookie("newbie", "New Student"))

        assert response.status_code == 200
        assert response.json()["user_id"] == "newbie"
        assert response.json()["display_name"] == "New Student"

    def test_me_without_auth_fails(self, client):
        """Should return 401 when not authenticated."""
        assert client.get("/auth/me").status_code == 401

    def test_public_profile(self, client):
        """A profile should list the user's posts."""
        post = _create_post(client, user_id="author-1")

        response = client.get("/users/author-1")

        assert response.status_code == 200
        assert [p["post_id"] for p in response.json()["posts"]] == [post["post_id"]]

    def test_get_nonexistent_user_profile(self, client):
        """Should return 404 for nonexistent user."""
        assert client.get("/users/nobody").status_code == 404
