"""Current identity routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request

from senatus.application.usecase.auth import (
    GetCurrentViewerRequest,
    GetCurrentViewerResponse,
    GetCurrentViewerUseCase,
)
from senatus.config import AuthSettings
from senatus.interface.api.session import session_token

router = APIRouter(tags=["auth"], route_class=DishkaRoute)


@router.get("/me", response_model=GetCurrentViewerResponse)
async def get_me(
    request: Request,
    get_current_viewer_use_case: FromDishka[GetCurrentViewerUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> GetCurrentViewerResponse:
    """Return the identity behind the session cookie, or null."""
    return await get_current_viewer_use_case.execute(
        GetCurrentViewerRequest(token=session_token(request, auth_settings))
    )
