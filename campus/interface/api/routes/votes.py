"""Vote routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel

from campus.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetVoteRequest,
    GetVoteResponse,
    GetVoteUseCase,
)
from campus.domain.service import JWTService
from campus.domain.value import VoteType

router = APIRouter(prefix="/posts", tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for casting a vote."""

    vote_type: VoteType


@router.post("/{post_id}/vote", response_model=CastVoteResponse)
async def vote_on_post(
    post_id: UUID,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Vote on a post.

    Requires authentication. Casting the vote the caller already holds
    withdraws it; casting the other polarity flips it.

    Args:
        post_id: Post UUID
        request: Vote polarity
        cast_vote_use_case: Cast vote use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        The post's tally and the caller's resulting vote
    """
    return await cast_vote_use_case.execute(
        CastVoteRequest(
            post_id=str(post_id),
            vote_type=request.vote_type,
            principal=jwt_service.get_principal_from_token(auth_token),
        )
    )


@router.get("/{post_id}/vote", response_model=GetVoteResponse)
async def get_post_vote(
    post_id: UUID,
    get_vote_use_case: FromDishka[GetVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetVoteResponse:
    """Get the caller's vote on a post."""
    return await get_vote_use_case.execute(
        GetVoteRequest(
            post_id=str(post_id),
            principal=jwt_service.get_principal_from_token(auth_token),
        )
    )


@router.post("/{post_id}/comments/{author_id}/vote", response_model=CastVoteResponse)
async def vote_on_comment(
    post_id: UUID,
    author_id: str,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Vote on an author's comment on a post.

    Requires authentication.
    """
    return await cast_vote_use_case.execute(
        CastVoteRequest(
            post_id=str(post_id),
            comment_author_id=author_id,
            vote_type=request.vote_type,
            principal=jwt_service.get_principal_from_token(auth_token),
        )
    )


@router.get("/{post_id}/comments/{author_id}/vote", response_model=GetVoteResponse)
async def get_comment_vote(
    post_id: UUID,
    author_id: str,
    get_vote_use_case: FromDishka[GetVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetVoteResponse:
    """Get the caller's vote on an author's comment."""
    return await get_vote_use_case.execute(
        GetVoteRequest(
            post_id=str(post_id),
            comment_author_id=author_id,
            principal=jwt_service.get_principal_from_token(auth_token),
        )
    )
