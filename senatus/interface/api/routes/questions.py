"""Question routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from pydantic import BaseModel, Field

from senatus.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionResponse,
    CreateQuestionUseCase,
)
from senatus.config import AuthSettings
from senatus.domain.error import DomainError
from senatus.domain.service import JWTService
from senatus.interface.api.errors import to_http_error
from senatus.interface.api.session import current_viewer

router = APIRouter(tags=["questions"], route_class=DishkaRoute)


class CreateQuestionAPIRequest(BaseModel):
    """API request for asking a question."""

    text: str = Field(max_length=1000)


@router.post(
    "/topics/{topic_id}/questions",
    response_model=CreateQuestionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_question(
    topic_id: str,
    body: CreateQuestionAPIRequest,
    request: Request,
    create_question_use_case: FromDishka[CreateQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> CreateQuestionResponse:
    """Ask a question within a topic.

    Requires authentication.

    Raises:
        HTTPException: 401 if anonymous, 400 on blank text or malformed
            topic ID, 404 if the topic does not exist
    """
    viewer = current_viewer(request, jwt_service, auth_settings)
    try:
        return await create_question_use_case.execute(
            CreateQuestionRequest(topic_id=topic_id, text=body.text, viewer=viewer)
        )
    except DomainError as e:
        raise to_http_error(e) from e
