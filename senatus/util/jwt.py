"""JWT session token utilities.

The authentication collaborator issues these tokens after it has verified
the user with the identity provider; Senatus only reads them.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from senatus.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    external_id: str
    display_name: str
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(external_id: str, display_name: str, settings: AuthSettings) -> str:
    """Create a session token for a verified identity.

    Args:
        external_id: Stable identity from the authentication provider
        display_name: Name shown next to the user's topics and questions
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "external_id": external_id,
        "display_name": display_name,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a session token.

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
    except (jwt.InvalidTokenError, ValueError):
        raise JWTError("Invalid token")
