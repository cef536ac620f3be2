"""Topic routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from pydantic import BaseModel, Field

from senatus.application.usecase.topic import (
    CreateTopicRequest,
    CreateTopicResponse,
    CreateTopicUseCase,
    ListMyTopicsRequest,
    ListMyTopicsResponse,
    ListMyTopicsUseCase,
    ViewTopicRequest,
    ViewTopicResponse,
    ViewTopicUseCase,
)
from senatus.config import AuthSettings
from senatus.domain.error import DomainError
from senatus.domain.service import JWTService
from senatus.interface.api.errors import to_http_error
from senatus.interface.api.session import current_viewer

router = APIRouter(prefix="/topics", tags=["topics"], route_class=DishkaRoute)


class CreateTopicAPIRequest(BaseModel):
    """API request for creating a topic."""

    name: str = Field(max_length=200)
    description: str = Field(default="", max_length=5000)


@router.post(
    "", response_model=CreateTopicResponse, status_code=status.HTTP_201_CREATED
)
async def create_topic(
    body: CreateTopicAPIRequest,
    request: Request,
    create_topic_use_case: FromDishka[CreateTopicUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> CreateTopicResponse:
    """Create a new topic.

    Requires authentication. A blank name is rejected with 400.
    """
    viewer = current_viewer(request, jwt_service, auth_settings)
    try:
        return await create_topic_use_case.execute(
            CreateTopicRequest(
                name=body.name, description=body.description, viewer=viewer
            )
        )
    except DomainError as e:
        raise to_http_error(e) from e


@router.get("", response_model=ListMyTopicsResponse)
async def list_my_topics(
    request: Request,
    list_my_topics_use_case: FromDishka[ListMyTopicsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> ListMyTopicsResponse:
    """List the topics created by the current user, newest first."""
    viewer = current_viewer(request, jwt_service, auth_settings)
    try:
        return await list_my_topics_use_case.execute(ListMyTopicsRequest(viewer=viewer))
    except DomainError as e:
        raise to_http_error(e) from e


@router.get("/{topic_id}", response_model=ViewTopicResponse)
async def view_topic(
    topic_id: str,
    request: Request,
    view_topic_use_case: FromDishka[ViewTopicUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> ViewTopicResponse:
    """Show a topic with its questions ranked by votes.

    Authentication is optional. Anonymous viewers see counts but can never
    vote.
    """
    viewer = current_viewer(request, jwt_service, auth_settings)
    try:
        return await view_topic_use_case.execute(
            ViewTopicRequest(topic_id=topic_id, viewer=viewer)
        )
    except DomainError as e:
        raise to_http_error(e) from e
