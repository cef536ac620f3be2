"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request

from senatus.application.usecase.vote import (
    UnvoteRequest,
    UnvoteResponse,
    UnvoteUseCase,
    VoteRequest,
    VoteResponse,
    VoteUseCase,
)
from senatus.config import AuthSettings
from senatus.domain.error import DomainError
from senatus.domain.service import JWTService
from senatus.interface.api.errors import to_http_error
from senatus.interface.api.session import current_viewer

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


@router.post(
    "/topics/{topic_id}/questions/{question_id}/vote", response_model=VoteResponse
)
async def vote(
    topic_id: str,
    question_id: str,
    request: Request,
    vote_use_case: FromDishka[VoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> VoteResponse:
    """Vote for a question.

    Requires authentication. Voting twice is not an error; the vote is
    counted once.

    Args:
        topic_id: Topic UUID (addressing only)
        question_id: Question UUID
        request: Incoming request carrying the session cookie
        vote_use_case: Vote use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_settings: Auth settings naming the session cookie

    Returns:
        Vote state with the current count
    """
    viewer = current_viewer(request, jwt_service, auth_settings)
    try:
        return await vote_use_case.execute(
            VoteRequest(question_id=question_id, viewer=viewer)
        )
    except DomainError as e:
        raise to_http_error(e) from e


@router.delete(
    "/topics/{topic_id}/questions/{question_id}/vote", response_model=UnvoteResponse
)
async def unvote(
    topic_id: str,
    question_id: str,
    request: Request,
    unvote_use_case: FromDishka[UnvoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> UnvoteResponse:
    """Retract a vote from a question.

    Requires authentication. Retracting a missing vote succeeds.
    """
    viewer = current_viewer(request, jwt_service, auth_settings)
    try:
        return await unvote_use_case.execute(
            UnvoteRequest(question_id=question_id, viewer=viewer)
        )
    except DomainError as e:
        raise to_http_error(e) from e
