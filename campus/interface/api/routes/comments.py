"""Comment routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from campus.application.usecase.comment import (
    CommentItem,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    EditCommentRequest,
    EditCommentUseCase,
    GetCommentRequest,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    GetCommentUseCase,
    PostCommentRequest,
    PostCommentUseCase,
)
from campus.domain.model.comment import COMMENT_MAX_LENGTH
from campus.domain.service import JWTService

router = APIRouter(prefix="/posts", tags=["comments"], route_class=DishkaRoute)


class CommentTextAPIRequest(BaseModel):
    """API request carrying comment text."""

    text: str = Field(min_length=1, max_length=COMMENT_MAX_LENGTH)


@router.get("/{post_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    post_id: UUID,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetCommentsResponse:
    """Get all comments on a post, oldest first.

    Args:
        post_id: Post UUID
        get_comments_use_case: Get comments use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie (optional, adds the caller's votes)

    Returns:
        Comments with the caller's vote on each
    """
    return await get_comments_use_case.execute(
        GetCommentsRequest(
            post_id=str(post_id),
            principal=jwt_service.get_principal_from_token(auth_token),
        )
    )


@router.post(
    "/{post_id}/comments",
    response_model=CommentItem,
    status_code=status.HTTP_201_CREATED,
)
async def post_comment(
    post_id: UUID,
    request: CommentTextAPIRequest,
    post_comment_use_case: FromDishka[PostCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Comment on a post.

    Requires authentication. Each user holds one comment per post; a
    second comment is rejected and the existing one should be edited.

    Args:
        post_id: Post UUID
        request: Comment text
        post_comment_use_case: Post comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        The created comment
    """
    return await post_comment_use_case.execute(
        PostCommentRequest(
            post_id=str(post_id),
            text=request.text,
            principal=jwt_service.get_principal_from_token(auth_token),
        )
    )


@router.patch("/{post_id}/comments", response_model=CommentItem)
async def edit_comment(
    post_id: UUID,
    request: CommentTextAPIRequest,
    edit_comment_use_case: FromDishka[EditCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Edit the caller's comment on a post.

    Requires authentication.
    """
    return await edit_comment_use_case.execute(
        EditCommentRequest(
            post_id=str(post_id),
            text=request.text,
            principal=jwt_service.get_principal_from_token(auth_token),
        )
    )


@router.get("/{post_id}/comments/{author_id}", response_model=CommentItem)
async def get_comment(
    post_id: UUID,
    author_id: str,
    get_comment_use_case: FromDishka[GetCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Get an author's comment on a post."""
    return await get_comment_use_case.execute(
        GetCommentRequest(
            post_id=str(post_id),
            author_id=author_id,
            principal=jwt_service.get_principal_from_token(auth_token),
        )
    )


@router.delete("/{post_id}/comments/{author_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    post_id: UUID,
    author_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Delete an author's comment on a post.

    Authors may delete their own comment; administrators may delete any.
    """
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(
            post_id=str(post_id),
            author_id=author_id,
            principal=jwt_service.get_principal_from_token(auth_token),
        )
    )
