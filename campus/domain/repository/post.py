"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from campus.domain.model.post import Post
from campus.domain.value import PostId, UserId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        include_suspended: bool = False,
        limit: int = 20,
        offset: int = 0,
        query: Optional[str] = None,
    ) -> List[Post]:
        """Find posts newest-first.

        Args:
            include_suspended: Whether to include suspended posts
            limit: Maximum number of posts to return
            offset: Number of posts to skip
            query: Case-insensitive text matched against title or body

        Returns:
            List of posts
        """
        pass

    @abstractmethod
    async def find_suspended(self) -> List[Post]:
        """Find all suspended posts newest-first.

        Returns:
            List of suspended posts
        """
        pass

    @abstractmethod
    async def find_by_author(
        self,
        author_id: UserId,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts by a specific author, newest-first.

        Args:
            author_id: The author's user ID
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts by the author
        """
        pass

    @abstractmethod
    async def create(self, post: Post) -> Post:
        """Insert a new post.

        Args:
            post: The post to insert

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def update(self, post: Post, expected_version: int) -> Post:
        """Write a post's counters if nobody changed it since it was read.

        Compare-and-set on ``version``: the write only applies when the
        stored version equals ``expected_version``; the stored version is
        then bumped by one.

        Args:
            post: Post carrying the new counter values
            expected_version: Version the caller read

        Returns:
            The saved post with its new version

        Raises:
            ConcurrentUpdateError: If the stored version differs or the post is gone
        """
        pass

    @abstractmethod
    async def update_content(self, post: Post) -> Optional[Post]:
        """Write a post's title, text, image and category.

        Counters and ``version`` are left alone, so content edits never
        collide with concurrent vote, comment or report writes.

        Args:
            post: Post carrying the new content

        Returns:
            The saved post, or None if it no longer exists
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post together with its comments and votes.

        Args:
            post_id: The post ID to delete

        Returns:
            True if a post was deleted, False if it did not exist
        """
        pass
