"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

import logfire
from sqlalchemy import delete, desc, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from campus.domain.error import ConcurrentUpdateError
from campus.domain.model import Post
from campus.domain.repository.post import PostRepository
from campus.domain.value import ContentType, PostId, UserId
from campus.persistence.errors import store_errors
from campus.persistence.mappers import post_to_dict, row_to_post
from campus.persistence.tables import comments_table, posts_table, votes_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            with store_errors("post", post_id):
                result = await self.session.execute(stmt)
                row = result.fetchone()

            return row_to_post(row._asdict()) if row else None

    async def find_all(
        self,
        include_suspended: bool = False,
        limit: int = 20,
        offset: int = 0,
        query: Optional[str] = None,
    ) -> List[Post]:
        """Find posts newest-first with pagination."""
        with logfire.span(
            "post_repository.find_all",
            include_suspended=include_suspended,
            query=query,
            limit=limit,
            offset=offset,
        ):
            stmt = select(posts_table)

            if not include_suspended:
                stmt = stmt.where(posts_table.c.is_suspended.is_(False))

            if query:
                stmt = stmt.where(
                    or_(
                        posts_table.c.title.icontains(query, autoescape=True),
                        posts_table.c.text.icontains(query, autoescape=True),
                    )
                )

            stmt = (
                stmt.order_by(desc(posts_table.c.created_at)).limit(limit).offset(offset)
            )

            with store_errors("post"):
                result = await self.session.execute(stmt)
                rows = result.fetchall()

            return [row_to_post(row._asdict()) for row in rows]

    async def find_suspended(self) -> List[Post]:
        """Find all suspended posts, newest first."""
        stmt = (
            select(posts_table)
            .where(posts_table.c.is_suspended.is_(True))
            .order_by(desc(posts_table.c.created_at))
        )
        with store_errors("post"):
            result = await self.session.execute(stmt)
            return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def find_by_author(
        self,
        author_id: UserId,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts by a specific author."""
        stmt = (
            select(posts_table)
            .where(posts_table.c.author_id == author_id)
            .order_by(desc(posts_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        with store_errors("post"):
            result = await self.session.execute(stmt)
            return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def create(self, post: Post) -> Post:
        """Insert a new post."""
        with logfire.span(
            "post_repository.create", post_id=str(post.id), title=post.title
        ):
            stmt = posts_table.insert().values(**post_to_dict(post))
            with store_errors("post", post.id):
                await self.session.execute(stmt)
                await self.session.flush()
            return post

    async def update(self, post: Post, expected_version: int) -> Post:
        """Write a post's counters with compare-and-set on ``version``."""
        with logfire.span(
            "post_repository.update",
            post_id=str(post.id),
            expected_version=expected_version,
        ):
            stmt = (
                update(posts_table)
                .where(posts_table.c.id == post.id)
                .where(posts_table.c.version == expected_version)
                .values(
                    upvotes=post.reactions.upvotes,
                    downvotes=post.reactions.downvotes,
                    comments_count=post.comments_count,
                    report_count=post.report_count,
                    is_suspended=post.is_suspended,
                    version=expected_version + 1,
                )
                .returning(posts_table)
            )

            with store_errors("post", post.id):
                result = await self.session.execute(stmt)
                row = result.fetchone()

            if row is None:
                logfire.warn(
                    "Post version changed or post gone",
                    post_id=str(post.id),
                    expected_version=expected_version,
                )
                raise ConcurrentUpdateError("post", str(post.id))

            return row_to_post(row._asdict())

    async def update_content(self, post: Post) -> Optional[Post]:
        """Write a post's content columns."""
        with logfire.span("post_repository.update_content", post_id=str(post.id)):
            stmt = (
                update(posts_table)
                .where(posts_table.c.id == post.id)
                .values(
                    title=post.title,
                    text=post.text,
                    image_url=post.image_url,
                    category=post.category.value,
                )
                .returning(posts_table)
            )

            with store_errors("post", post.id):
                result = await self.session.execute(stmt)
                row = result.fetchone()
                await self.session.flush()

            if row is None:
                logfire.warn("Post to edit not found", post_id=str(post.id))
                return None

            return row_to_post(row._asdict())

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete) with its comments and their votes."""
        with logfire.span("post_repository.delete", post_id=str(post_id)):
            comment_ids = select(comments_table.c.id).where(
                comments_table.c.post_id == post_id
            )

            with store_errors("post", post_id):
                # Votes carry no foreign key; comments go with the post by cascade
                await self.session.execute(
                    delete(votes_table).where(
                        (
                            (votes_table.c.votable_type == ContentType.POST.value)
                            & (votes_table.c.votable_id == post_id)
                        )
                        | (
                            (votes_table.c.votable_type == ContentType.COMMENT.value)
                            & (votes_table.c.votable_id.in_(comment_ids))
                        )
                    )
                )
                result = await self.session.execute(
                    delete(posts_table).where(posts_table.c.id == post_id)
                )
                await self.session.flush()

            return result.rowcount > 0  # type: ignore[attr-defined]
