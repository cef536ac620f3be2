"""Session cookie handling."""

from fastapi import Request

from senatus.config import AuthSettings
from senatus.domain.service import JWTService
from senatus.domain.value import User


def session_token(request: Request, auth_settings: AuthSettings) -> str | None:
    """Read the raw session token from the configured cookie.

    Read from the request rather than a `Cookie()` parameter because the
    cookie name comes from `AuthSettings.cookie_name`.
    """
    return request.cookies.get(auth_settings.cookie_name)


def current_viewer(
    request: Request, jwt_service: JWTService, auth_settings: AuthSettings
) -> User | None:
    """Resolve the viewer for a request, or None when anonymous."""
    return jwt_service.get_viewer_from_token(session_token(request, auth_settings))
