"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from campus.domain.model.comment import Comment
from campus.domain.value import CommentId, PostId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Comments are keyed by (post_id, author_id).
    """

    @abstractmethod
    async def find(self, post_id: PostId, author_id: UserId) -> Optional[Comment]:
        """Find an author's comment on a post.

        Args:
            post_id: The post ID
            author_id: The comment author's user ID

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by its derived ID.

        Args:
            comment_id: The comment ID (see ``comment_id_for``)

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments on a post, oldest first.

        Args:
            post_id: The post ID

        Returns:
            List of comments
        """
        pass

    @abstractmethod
    async def find_by_author(
        self,
        author_id: UserId,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments by a specific author, newest first.

        Args:
            author_id: The author's user ID
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            List of comments by the author
        """
        pass

    @abstractmethod
    async def create(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to insert

        Returns:
            The saved comment

        Raises:
            ConcurrentUpdateError: If a comment for the same key was inserted concurrently
        """
        pass

    @abstractmethod
    async def update(self, comment: Comment, expected_version: int) -> Comment:
        """Write a comment's text, edit time and reactions (compare-and-set).

        Args:
            comment: Comment carrying the new values
            expected_version: Version the caller read

        Returns:
            The saved comment with its new version

        Raises:
            ConcurrentUpdateError: If the stored version differs or the comment is gone
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId, author_id: UserId) -> bool:
        """Delete an author's comment on a post together with its votes.

        Args:
            post_id: The post ID
            author_id: The comment author's user ID

        Returns:
            True if a comment was deleted, False if none existed
        """
        pass
