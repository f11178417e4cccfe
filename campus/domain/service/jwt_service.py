"""JWT token domain service."""

import logfire

from campus.config import AuthSettings
from campus.domain.value import Principal, UserId
from campus.util.error import JWTError
from campus.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, principal: Principal) -> str:
        """Create JWT token for a principal.

        Args:
            principal: Authenticated identity

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=principal.id):
            token = create_token(
                principal.id,
                principal.display_name,
                principal.email,
                principal.avatar_url,
                self.auth_settings,
            )
            logfire.info("JWT token created", user_id=principal.id)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", user_id=payload.user_id)
                return payload
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_principal_from_token(self, token: str | None) -> Principal | None:
        """Extract the principal from a JWT token without raising exceptions.

        API routes pass the result on; operations that need a principal
        reject ``None`` with UnauthenticatedError.

        Args:
            token: JWT token string (optional)

        Returns:
            Principal if token is valid, None if token is missing or invalid
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
        except JWTError:
            # Invalid or expired token, treat as unauthenticated
            return None

        return Principal(
            id=UserId(payload.user_id),
            display_name=payload.display_name,
            email=payload.email,
            avatar_url=payload.avatar_url,
        )
