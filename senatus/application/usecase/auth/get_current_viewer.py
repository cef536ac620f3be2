"""Get current viewer use case."""

from pydantic import BaseModel

from senatus.domain.service import JWTService


class GetCurrentViewerRequest(BaseModel):
    """Get current viewer request."""

    token: str | None = None  # JWT token from the session cookie


class ViewerInfo(BaseModel):
    """Identity carried by a valid session."""

    external_id: str
    display_name: str


class GetCurrentViewerResponse(BaseModel):
    """Get current viewer response."""

    viewer: ViewerInfo | None  # None for anonymous callers


class GetCurrentViewerUseCase:
    """Use case for resolving who is making the request."""

    def __init__(self, jwt_service: JWTService) -> None:
        """Initialize get current viewer use case.

        Args:
            jwt_service: JWT token domain service
        """
        self.jwt_service = jwt_service

    async def execute(
        self, request: GetCurrentViewerRequest
    ) -> GetCurrentViewerResponse:
        """Execute get current viewer flow.

        Invalid or expired tokens resolve to an anonymous viewer rather
        than an error.
        """
        user = self.jwt_service.get_viewer_from_token(request.token)
        if user is None:
            return GetCurrentViewerResponse(viewer=None)

        return GetCurrentViewerResponse(
            viewer=ViewerInfo(
                external_id=user.external_id, display_name=user.display_name
            )
        )
