"""Comment domain service."""

import logfire

from campus.domain.error import (
    DuplicateCommentError,
    NotFoundError,
    UnauthenticatedError,
    ValidationError,
)
from campus.domain.model.comment import COMMENT_MAX_LENGTH, Comment
from campus.domain.model.common import utcnow
from campus.domain.model.post import Post
from campus.domain.repository import (
    CommentRepository,
    PostRepository,
    TransactionManager,
)
from campus.domain.value import AuthorSnapshot, PostId, UserId

from .base import TransactionalService


class CommentService(TransactionalService):
    """Domain service for the one-comment-per-author-per-post gate.

    Creating and deleting a comment move the parent post's comment count in
    the same atomic scope as the comment write.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        transaction: TransactionManager,
        max_attempts: int = 3,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository
            transaction: Transaction manager
            max_attempts: Attempts per write before giving up on conflicts
        """
        super().__init__(transaction, max_attempts)
        self.comment_repository = comment_repository
        self.post_repository = post_repository

    async def post_comment(
        self, post_id: PostId, author: AuthorSnapshot | None, text: str
    ) -> Comment:
        """Create the author's comment on a post.

        Args:
            post_id: Post ID
            author: Author snapshot, None if the caller is anonymous
            text: Comment text

        Returns:
            Created comment

        Raises:
            UnauthenticatedError: If there is no author
            ValidationError: If the text is empty or too long
            NotFoundError: If the post does not exist
            DuplicateCommentError: If the author already has a comment on the post
        """
        if author is None:
            raise UnauthenticatedError("comment")
        text = self._clean_text(text)

        async def apply() -> Comment:
            post = await self._load_post(post_id)
            if await self.comment_repository.find(post_id, author.id):
                logfire.warn(
                    "Duplicate comment attempt",
                    post_id=str(post_id),
                    author_id=author.id,
                )
                raise DuplicateCommentError(str(post_id), author.id)

            saved = await self.comment_repository.create(
                Comment(post_id=post_id, author_id=author.id, author=author, text=text)
            )
            await self._move_comments_count(post, 1)
            return saved

        with logfire.span(
            "comment_service.post_comment",
            post_id=str(post_id),
            author_id=author.id,
            text_length=len(text),
        ):
            comment = await self.run_atomic("post_comment", apply)
            logfire.info(
                "Comment created", post_id=str(post_id), author_id=author.id
            )
            return comment

    async def edit_comment(
        self, post_id: PostId, author_id: UserId, text: str
    ) -> Comment:
        """Replace the text of the author's comment.

        The comment keeps its key, ``created_at`` and reactions; ``edited_at``
        is set to now.

        Args:
            post_id: Post ID
            author_id: Author user ID
            text: New comment text

        Returns:
            Updated comment

        Raises:
            ValidationError: If the text is empty or too long
            NotFoundError: If the author has no comment on the post
        """
        text = self._clean_text(text)

        async def apply() -> Comment:
            comment = await self._load_comment(post_id, author_id)
            return await self.comment_repository.update(
                comment.model_copy(update={"text": text, "edited_at": utcnow()}),
                expected_version=comment.version,
            )

        with logfire.span(
            "comment_service.edit_comment",
            post_id=str(post_id),
            author_id=author_id,
            text_length=len(text),
        ):
            updated = await self.run_atomic("edit_comment", apply)
            logfire.info("Comment edited", post_id=str(post_id), author_id=author_id)
            return updated

    async def delete_comment(self, post_id: PostId, author_id: UserId) -> None:
        """Delete the author's comment and its votes.

        Args:
            post_id: Post ID
            author_id: Author user ID

        Raises:
            NotFoundError: If the author has no comment on the post
        """

        async def apply() -> None:
            if not await self.comment_repository.delete(post_id, author_id):
                logfire.warn(
                    "Comment to delete not found",
                    post_id=str(post_id),
                    author_id=author_id,
                )
                raise NotFoundError("Comment", f"{post_id}/{author_id}")
            post = await self.post_repository.find_by_id(post_id)
            if post is not None:
                await self._move_comments_count(post, -1)

        with logfire.span(
            "comment_service.delete_comment",
            post_id=str(post_id),
            author_id=author_id,
        ):
            await self.run_atomic("delete_comment", apply)
            logfire.info("Comment deleted", post_id=str(post_id), author_id=author_id)

    async def get_comment(self, post_id: PostId, author_id: UserId) -> Comment | None:
        """Get the author's comment on a post.

        Args:
            post_id: Post ID
            author_id: Author user ID

        Returns:
            Comment if found, None otherwise
        """
        return await self.comment_repository.find(post_id, author_id)

    async def get_comments_for_post(self, post_id: PostId) -> list[Comment]:
        """Get all comments on a post, oldest first.

        Args:
            post_id: Post ID

        Returns:
            Comments on the post
        """
        with logfire.span(
            "comment_service.get_comments_for_post", post_id=str(post_id)
        ):
            comments = await self.comment_repository.find_by_post(post_id)
            logfire.info(
                "Comments retrieved for post", post_id=str(post_id), count=len(comments)
            )
            return comments

    async def get_comments_by_author(
        self, author_id: UserId, limit: int = 20, offset: int = 0
    ) -> list[Comment]:
        """Get an author's comments, newest first."""
        return await self.comment_repository.find_by_author(
            author_id, limit=limit, offset=offset
        )

    async def _load_post(self, post_id: PostId) -> Post:
        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            logfire.warn("Comment on non-existent post", post_id=str(post_id))
            raise NotFoundError("Post", str(post_id))
        return post

    async def _load_comment(self, post_id: PostId, author_id: UserId) -> Comment:
        comment = await self.comment_repository.find(post_id, author_id)
        if comment is None:
            logfire.warn(
                "Comment not found", post_id=str(post_id), author_id=author_id
            )
            raise NotFoundError("Comment", f"{post_id}/{author_id}")
        return comment

    async def _move_comments_count(self, post: Post, delta: int) -> None:
        await self.post_repository.update(
            post.with_comments_count(delta), expected_version=post.version
        )

    @staticmethod
    def _clean_text(text: str) -> str:
        text = text.strip()
        if not text:
            raise ValidationError("Comment cannot be empty")
        if len(text) > COMMENT_MAX_LENGTH:
            raise ValidationError(
                f"Comment cannot exceed {COMMENT_MAX_LENGTH} characters"
            )
        return text
