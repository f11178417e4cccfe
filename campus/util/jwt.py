"""JWT token utilities.

Tokens carry the identity provider's principal as claims.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from campus.config import AuthSettings
from campus.util.error import JWTError


class TokenPayload(BaseModel):
    """JWT token payload."""

    user_id: str
    display_name: str
    email: str | None = None
    avatar_url: str | None = None
    exp: datetime


def create_token(
    user_id: str,
    display_name: str,
    email: str | None,
    avatar_url: str | None,
    settings: AuthSettings,
) -> str:
    """Create a JWT token for the principal.

    Args:
        user_id: Identity provider user ID
        display_name: Display name
        email: Email address
        avatar_url: Avatar URL
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "user_id": user_id,
        "display_name": display_name,
        "email": email,
        "avatar_url": avatar_url,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
