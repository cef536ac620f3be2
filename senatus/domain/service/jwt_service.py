"""JWT token domain service."""

import logfire

from senatus.config import AuthSettings
from senatus.domain.value import User
from senatus.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service turning session tokens into viewer identities."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user: User) -> str:
        """Create a session token for a user.

        Args:
            user: Verified identity

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", external_id=user.external_id):
            token = create_token(user.external_id, user.display_name, self.auth_settings)
            logfire.info("JWT token created", external_id=user.external_id)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", external_id=payload.external_id)
                return payload
            except Exception as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_viewer_from_token(self, token: str | None) -> User | None:
        """Resolve the viewer identity without raising.

        Missing, invalid or expired tokens all mean an anonymous viewer.

        Args:
            token: JWT token string (optional)

        Returns:
            The viewer, or None when unauthenticated
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
            return User(
                external_id=payload.external_id, display_name=payload.display_name
            )
        except Exception as e:
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None
