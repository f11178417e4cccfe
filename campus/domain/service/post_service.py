"""Post domain service."""

from typing import Any
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from campus.domain.error import NotFoundError, ValidationError
from campus.domain.model.post import Post
from campus.domain.model.user import User
from campus.domain.repository import PostRepository
from campus.domain.value import AuthorSnapshot, PostCategory, PostId, UserId

from .base import Service

# Fields an author may change after posting
EDITABLE_FIELDS = ("title", "text", "image_url", "category")


class PostService(Service):
    """Domain service for post operations.

    Post counters are not written here; see VoteService, CommentService
    and ReportService.
    """

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def create_post(
        self,
        author: AuthorSnapshot,
        title: str,
        category: PostCategory,
        text: str | None = None,
        image_url: str | None = None,
    ) -> Post:
        """Create a post with zeroed counters.

        Args:
            author: Author snapshot
            title: Post title
            category: Post category
            text: Optional body text
            image_url: Optional URL returned by the image host

        Returns:
            Created post

        Raises:
            ValidationError: If the post has neither text nor image, or a field is out of range
        """
        with logfire.span(
            "post_service.create_post",
            author_id=author.id,
            category=category.value,
            has_image=image_url is not None,
        ):
            try:
                post = Post(
                    id=PostId(uuid4()),
                    author_id=author.id,
                    author=author,
                    title=title,
                    text=text or None,
                    image_url=image_url or None,
                    category=category,
                )
            except PydanticValidationError as e:
                logfire.warn("Invalid post", author_id=author.id, error=str(e))
                raise ValidationError(e.errors()[0]["msg"]) from e

            saved = await self.post_repository.create(post)
            logfire.info("Post created", post_id=str(saved.id), author_id=author.id)
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=str(post_id), title=post.title)
            else:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def get_visible_post(self, post_id: PostId, viewer: User | None) -> Post:
        """Get a post the viewer is allowed to see.

        Suspended posts are only visible to their author and to administrators;
        to everyone else they do not exist.

        Args:
            post_id: Post ID
            viewer: Acting user, None for anonymous callers

        Returns:
            The post

        Raises:
            NotFoundError: If the post does not exist or is hidden from the viewer
        """
        post = await self.get_post_by_id(post_id)
        if post is None:
            raise NotFoundError("Post", str(post_id))

        if post.is_suspended and not (
            viewer and (viewer.id == post.author_id or viewer.is_admin)
        ):
            logfire.info(
                "Suspended post hidden from viewer",
                post_id=str(post_id),
                viewer_id=viewer.id if viewer else None,
            )
            raise NotFoundError("Post", str(post_id))

        return post

    async def update_post(self, post: Post, changes: dict[str, Any]) -> Post:
        """Replace a post's content fields.

        Only ``title``, ``text``, ``image_url`` and ``category`` may change;
        the result must still satisfy the post rules (text or image).

        Args:
            post: Post as currently stored
            changes: New values keyed by field name

        Returns:
            The saved post

        Raises:
            ValidationError: If the edited post breaks a post rule
            NotFoundError: If the post was deleted meanwhile
        """
        with logfire.span(
            "post_service.update_post", post_id=str(post.id), fields=sorted(changes)
        ):
            content = {k: v for k, v in changes.items() if k in EDITABLE_FIELDS}
            for field in ("text", "image_url"):
                if field in content:
                    content[field] = content[field] or None

            try:
                edited = Post.model_validate(post.model_dump() | content)
            except PydanticValidationError as e:
                logfire.warn("Invalid post edit", post_id=str(post.id), error=str(e))
                raise ValidationError(e.errors()[0]["msg"]) from e

            saved = await self.post_repository.update_content(edited)
            if saved is None:
                raise NotFoundError("Post", str(post.id))

            logfire.info("Post edited", post_id=str(post.id))
            return saved

    async def list_posts(
        self,
        include_suspended: bool = False,
        limit: int = 20,
        offset: int = 0,
        query: str | None = None,
    ) -> list[Post]:
        """List posts newest-first.

        Args:
            include_suspended: Whether suspended posts are included (moderators)
            limit: Page size
            offset: Posts to skip
            query: Optional search text matched against title or body

        Returns:
            Posts
        """
        with logfire.span(
            "post_service.list_posts",
            include_suspended=include_suspended,
            query=query,
            limit=limit,
            offset=offset,
        ):
            posts = await self.post_repository.find_all(
                include_suspended=include_suspended,
                limit=limit,
                offset=offset,
                query=query,
            )
            logfire.info("Posts listed", count=len(posts))
            return posts

    async def list_suspended_posts(self) -> list[Post]:
        """List suspended posts for the moderation queue."""
        with logfire.span("post_service.list_suspended_posts"):
            posts = await self.post_repository.find_suspended()
            logfire.info("Suspended posts listed", count=len(posts))
            return posts

    async def list_posts_by_author(
        self, author_id: UserId, limit: int = 20, offset: int = 0
    ) -> list[Post]:
        """List an author's posts newest-first."""
        return await self.post_repository.find_by_author(
            author_id, limit=limit, offset=offset
        )

    async def delete_post(self, post_id: PostId) -> bool:
        """Delete a post with its comments and votes.

        Reports about the post are kept for the moderation record.

        Args:
            post_id: Post ID

        Returns:
            True if the post existed and was deleted
        """
        with logfire.span("post_service.delete_post", post_id=str(post_id)):
            deleted = await self.post_repository.delete(post_id)
            if deleted:
                logfire.info("Post deleted", post_id=str(post_id))
            else:
                logfire.warn("Post to delete not found", post_id=str(post_id))
            return deleted
