"""In-memory comment repository for testing."""

from typing import Optional

from campus.domain.error import ConcurrentUpdateError
from campus.domain.model.comment import Comment
from campus.domain.repository.comment import CommentRepository
from campus.domain.value import CommentId, ContentType, PostId, UserId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find(self, post_id: PostId, author_id: UserId) -> Optional[Comment]:
        """Find an author's comment on a post."""
        return self.store.comments.get((post_id, author_id))

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by its derived ID."""
        for comment in self.store.comments.values():
            if comment.id == comment_id:
                return comment
        return None

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find all comments on a post, oldest first."""
        comments = [c for c in self.store.comments.values() if c.post_id == post_id]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def find_by_author(
        self,
        author_id: UserId,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Comment]:
        """Find comments by a specific author, newest first."""
        comments = [
            c for c in self.store.comments.values() if c.author_id == author_id
        ]
        comments.sort(key=lambda c: c.created_at, reverse=True)
        return comments[offset : offset + limit]

    async def create(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        key = (comment.post_id, comment.author_id)
        if key in self.store.comments:
            raise ConcurrentUpdateError("comment", str(comment.id))
        self.store.comments[key] = comment
        return comment

    async def update(self, comment: Comment, expected_version: int) -> Comment:
        """Write a comment with compare-and-set on ``version``."""
        key = (comment.post_id, comment.author_id)
        stored = self.store.comments.get(key)
        if stored is None or stored.version != expected_version:
            raise ConcurrentUpdateError("comment", str(comment.id))

        saved = stored.model_copy(
            update={
                "text": comment.text,
                "edited_at": comment.edited_at,
                "reactions": comment.reactions,
                "version": expected_version + 1,
            }
        )
        self.store.comments[key] = saved
        return saved

    async def delete(self, post_id: PostId, author_id: UserId) -> bool:
        """Delete an author's comment and the votes on it."""
        comment = self.store.comments.pop((post_id, author_id), None)
        if comment is None:
            return False

        self.store.votes = {
            key: v
            for key, v in self.store.votes.items()
            if not (
                v.votable_type == ContentType.COMMENT and v.votable_id == comment.id
            )
        }
        return True
