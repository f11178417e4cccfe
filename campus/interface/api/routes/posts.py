"""Post routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, Field

from campus.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    PostItem,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from campus.config import Settings
from campus.domain.service import JWTService
from campus.domain.value import PostCategory

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    title: str = Field(min_length=1, max_length=300)
    category: PostCategory
    text: str | None = Field(default=None, max_length=5000)
    image_url: str | None = None


class UpdatePostAPIRequest(BaseModel):
    """API request for editing a post.

    Omitted fields are left as they are; null clears text or image.
    """

    title: str | None = Field(default=None, min_length=1, max_length=300)
    category: PostCategory | None = None
    text: str | None = Field(default=None, max_length=5000)
    image_url: str | None = None


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
    limit: int | None = Query(default=None, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    query: str | None = Query(default=None, max_length=200),
    auth_token: str | None = Cookie(default=None),
) -> ListPostsResponse:
    """List posts newest first, optionally filtered by a search text.

    Suspended posts are only listed for administrators.

    Args:
        list_posts_use_case: List posts use case from DI
        jwt_service: JWT service for token verification (injected)
        settings: Application settings (default page size)
        limit: Page size
        offset: Posts to skip
        query: Optional search text matched against title or body
        auth_token: JWT token from cookie (optional)

    Returns:
        A page of posts
    """
    return await list_posts_use_case.execute(
        ListPostsRequest(
            limit=limit or settings.moderation.feed_page_size,
            offset=offset,
            query=query,
            principal=jwt_service.get_principal_from_token(auth_token),
        )
    )


@router.post("", response_model=PostItem, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> PostItem:
    """Create a post.

    Requires authentication.

    Args:
        request: Post creation data
        create_post_use_case: Create post use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        The created post
    """
    return await create_post_use_case.execute(
        CreatePostRequest(
            title=request.title,
            category=request.category,
            text=request.text,
            image_url=request.image_url,
            principal=jwt_service.get_principal_from_token(auth_token),
        )
    )


@router.get("/{post_id}", response_model=PostItem)
async def get_post(
    post_id: UUID,
    get_post_use_case: FromDishka[GetPostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> PostItem:
    """Get a post with the caller's vote on it."""
    return await get_post_use_case.execute(
        GetPostRequest(
            post_id=str(post_id),
            principal=jwt_service.get_principal_from_token(auth_token),
        )
    )


@router.patch("/{post_id}", response_model=PostItem)
async def update_post(
    post_id: UUID,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> PostItem:
    """Edit a post's title, category, text or image.

    Only the author may edit a post. The post must keep text or an image.

    Args:
        post_id: Post UUID
        request: Fields to change
        update_post_use_case: Update post use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        The edited post
    """
    return await update_post_use_case.execute(
        UpdatePostRequest(
            post_id=str(post_id),
            principal=jwt_service.get_principal_from_token(auth_token),
            **request.model_dump(exclude_unset=True),
        )
    )


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: UUID,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeletePostResponse:
    """Delete a post with its comments and votes.

    Only the author or an administrator may delete a post.
    """
    return await delete_post_use_case.execute(
        DeletePostRequest(
            post_id=str(post_id),
            principal=jwt_service.get_principal_from_token(auth_token),
        )
    )
