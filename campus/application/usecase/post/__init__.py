"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostResponse, DeletePostUseCase
from .get_post import GetPostRequest, GetPostUseCase, PostItem
from .list_posts import ListPostsRequest, ListPostsResponse, ListPostsUseCase
from .list_suspended_posts import (
    ListSuspendedPostsRequest,
    ListSuspendedPostsResponse,
    ListSuspendedPostsUseCase,
)
from .update_post import UpdatePostRequest, UpdatePostUseCase

__all__ = [
    "PostItem",
    "CreatePostRequest",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostResponse",
    "DeletePostUseCase",
    "GetPostRequest",
    "GetPostUseCase",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "ListSuspendedPostsRequest",
    "ListSuspendedPostsResponse",
    "ListSuspendedPostsUseCase",
    "UpdatePostRequest",
    "UpdatePostUseCase",
]
