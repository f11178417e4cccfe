"""Test configuration and fixtures."""

from typing import Callable
from uuid import uuid4

import logfire
import pytest

from campus.config import Settings
from campus.domain.error import ConcurrentUpdateError
from campus.domain.model import Post
from campus.domain.repository import PostRepository
from campus.domain.value import AuthorSnapshot, PostCategory, PostId, Principal, UserId
from campus.persistence.repository.inmemory import InMemoryPostRepository, InMemoryStore
from campus.util.jwt import create_token

# Spans and logs stay local during tests
logfire.configure(send_to_logfire=False, console=False)


def make_principal(
    user_id: str | None = None,
    display_name: str = "Test Student",
    email: str | None = None,
) -> Principal:
    """Build a principal as the identity provider would supply it."""
    user_id = user_id or f"idp|{uuid4().hex[:12]}"
    return Principal(
        id=UserId(user_id),
        display_name=display_name,
        email=email or f"{user_id.replace('|', '.')}@students.example.edu",
    )


def make_post(
    author_id: str = "idp|author",
    title: str = "Library opening hours during exams",
    text: str | None = "Is the main library open 24/7 this week?",
    category: PostCategory = PostCategory.QUESTION,
    **overrides,
) -> Post:
    """Build a post owned by ``author_id``."""
    return Post(
        id=PostId(uuid4()),
        author_id=UserId(author_id),
        author=AuthorSnapshot(id=UserId(author_id), display_name="Post Author"),
        title=title,
        text=text,
        category=category,
        **overrides,
    )


async def save_post(post_repo: PostRepository, **kwargs) -> Post:
    """Store a new post and return it."""
    return await post_repo.create(make_post(**kwargs))


class FlakyPostRepository(InMemoryPostRepository):
    """Post repository whose first ``failures`` counter writes fail.

    The default error is a lost compare-and-set race; pass ``error`` to fail
    with something else.
    """

    def __init__(
        self,
        store: InMemoryStore,
        failures: int,
        error: Callable[[Post], Exception] | None = None,
    ) -> None:
        super().__init__(store)
        self.failures = failures
        self.error = error or (
            lambda post: ConcurrentUpdateError("post", str(post.id))
        )
        self.update_calls = 0

    async def update(self, post: Post, expected_version: int) -> Post:
        self.update_calls += 1
        if self.update_calls <= self.failures:
            raise self.error(post)
        return await super().update(post, expected_version)


def auth_cookie(
    user_id: str, display_name: str = "Student", email: str | None = None
) -> dict[str, str]:
    """Cookie carrying a token for the given identity."""
    token = create_token(
        user_id,
        display_name,
        email or f"{user_id}@students.example.edu",
        None,
        Settings().auth,
    )
    return {"auth_token": token}


@pytest.fixture
def admin_email(monkeypatch) -> str:
    """Register an administrator email through the environment."""
    email = "dean.of.students@example.edu"
    monkeypatch.setenv("MODERATION__ADMIN_EMAILS", f'["{email}"]')
    return email
