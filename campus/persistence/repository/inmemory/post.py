"""In-memory post repository for testing."""

from typing import Optional

from campus.domain.error import ConcurrentUpdateError
from campus.domain.model.post import Post
from campus.domain.repository.post import PostRepository
from campus.domain.value import ContentType, PostId, UserId

from .store import InMemoryStore


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self.store.posts.get(post_id)

    async def find_all(
        self,
        include_suspended: bool = False,
        limit: int = 20,
        offset: int = 0,
        query: Optional[str] = None,
    ) -> list[Post]:
        """Find posts newest-first with pagination."""
        needle = query.lower() if query else None
        posts = [
            p
            for p in self.store.posts.values()
            if (include_suspended or not p.is_suspended)
            and (
                needle is None
                or needle in p.title.lower()
                or needle in (p.text or "").lower()
            )
        ]
        posts.sort(key=lambda p: p.created_at, reverse=True)
        return posts[offset : offset + limit]

    async def find_suspended(self) -> list[Post]:
        """Find all suspended posts, newest first."""
        posts = [p for p in self.store.posts.values() if p.is_suspended]
        posts.sort(key=lambda p: p.created_at, reverse=True)
        return posts

    async def find_by_author(
        self,
        author_id: UserId,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Post]:
        """Find posts by a specific author."""
        posts = [p for p in self.store.posts.values() if p.author_id == author_id]
        posts.sort(key=lambda p: p.created_at, reverse=True)
        return posts[offset : offset + limit]

    async def create(self, post: Post) -> Post:
        """Insert a new post."""
        if post.id in self.store.posts:
            raise ConcurrentUpdateError("post", str(post.id))
        self.store.posts[post.id] = post
        return post

    async def update(self, post: Post, expected_version: int) -> Post:
        """Write a post's counters with compare-and-set on ``version``."""
        stored = self.store.posts.get(post.id)
        if stored is None or stored.version != expected_version:
            raise ConcurrentUpdateError("post", str(post.id))

        saved = stored.model_copy(
            update={
                "reactions": post.reactions,
                "comments_count": post.comments_count,
                "report_count": post.report_count,
                "is_suspended": post.is_suspended,
                "version": expected_version + 1,
            }
        )
        self.store.posts[post.id] = saved
        return saved

    async def update_content(self, post: Post) -> Optional[Post]:
        """Write a post's content fields."""
        stored = self.store.posts.get(post.id)
        if stored is None:
            return None

        saved = stored.model_copy(
            update={
                "title": post.title,
                "text": post.text,
                "image_url": post.image_url,
                "category": post.category,
            }
        )
        self.store.posts[post.id] = saved
        return saved

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post with its comments and their votes."""
        if self.store.posts.pop(post_id, None) is None:
            return False

        removed = {
            key: c for key, c in self.store.comments.items() if c.post_id == post_id
        }
        for key in removed:
            del self.store.comments[key]

        comment_ids = {c.id for c in removed.values()}
        self.store.votes = {
            key: v
            for key, v in self.store.votes.items()
            if not (
                (v.votable_type == ContentType.POST and v.votable_id == post_id)
                or (v.votable_type == ContentType.COMMENT and v.votable_id in comment_ids)
            )
        }
        return True
