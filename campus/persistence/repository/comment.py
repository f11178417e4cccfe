"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

import logfire
from sqlalchemy import delete, desc, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from campus.domain.error import ConcurrentUpdateError
from campus.domain.model import Comment
from campus.domain.repository import CommentRepository
from campus.domain.value import CommentId, ContentType, PostId, UserId, comment_id_for
from campus.persistence.errors import store_errors
from campus.persistence.mappers import comment_to_dict, row_to_comment
from campus.persistence.tables import comments_table, votes_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find(self, post_id: PostId, author_id: UserId) -> Optional[Comment]:
        """Find an author's comment on a post."""
        stmt = select(comments_table).where(
            comments_table.c.post_id == post_id,
            comments_table.c.author_id == author_id,
        )
        with store_errors("comment", f"{post_id}/{author_id}"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by its derived ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        with store_errors("comment", comment_id):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments on a post, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .order_by(comments_table.c.created_at)
        )
        with store_errors("comment"):
            result = await self.session.execute(stmt)
            return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_by_author(
        self,
        author_id: UserId,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments by a specific author, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.author_id == author_id)
            .order_by(desc(comments_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        with store_errors("comment"):
            result = await self.session.execute(stmt)
            return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def create(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        with logfire.span(
            "comment_repository.create",
            post_id=str(comment.post_id),
            author_id=comment.author_id,
        ):
            stmt = comments_table.insert().values(**comment_to_dict(comment))
            with store_errors("comment", comment.id):
                await self.session.execute(stmt)
                await self.session.flush()
            return comment

    async def update(self, comment: Comment, expected_version: int) -> Comment:
        """Write a comment with compare-and-set on ``version``."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment.id)
            .where(comments_table.c.version == expected_version)
            .values(
                text=comment.text,
                edited_at=comment.edited_at,
                upvotes=comment.reactions.upvotes,
                downvotes=comment.reactions.downvotes,
                version=expected_version + 1,
            )
            .returning(comments_table)
        )

        with store_errors("comment", comment.id):
            result = await self.session.execute(stmt)
            row = result.fetchone()

        if row is None:
            logfire.warn(
                "Comment version changed or comment gone",
                comment_id=str(comment.id),
                expected_version=expected_version,
            )
            raise ConcurrentUpdateError("comment", str(comment.id))

        return row_to_comment(row._asdict())

    async def delete(self, post_id: PostId, author_id: UserId) -> bool:
        """Delete an author's comment and the votes on it."""
        comment_id = comment_id_for(post_id, author_id)
        with store_errors("comment", comment_id):
            await self.session.execute(
                delete(votes_table).where(
                    votes_table.c.votable_type == ContentType.COMMENT.value,
                    votes_table.c.votable_id == comment_id,
                )
            )
            result = await self.session.execute(
                delete(comments_table).where(comments_table.c.id == comment_id)
            )
            await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
