"""Unvote use case."""

from pydantic import BaseModel

from senatus.application.usecase.retry import retry_idempotent
from senatus.config import VoteSettings
from senatus.domain.service import AccessGate, VoteService
from senatus.domain.value import User, parse_question_id


class UnvoteRequest(BaseModel):
    """Unvote request."""

    question_id: str  # UUID string from the path
    viewer: User | None = None


class UnvoteResponse(BaseModel):
    """Vote state after the operation."""

    question_id: str
    voted: bool
    removed: bool  # False when there was no vote to retract
    vote_count: int


class UnvoteUseCase:
    """Use case for retracting a vote from a question."""

    def __init__(
        self,
        vote_service: VoteService,
        access_gate: AccessGate,
        vote_settings: VoteSettings,
    ) -> None:
        self.vote_service = vote_service
        self.access_gate = access_gate
        self.vote_settings = vote_settings

    async def execute(self, request: UnvoteRequest) -> UnvoteResponse:
        """Execute unvote flow.

        Retracting a vote that does not exist succeeds with removed=False.

        Raises:
            NotAuthenticatedError: If there is no viewer
            InvalidReferenceError: If the question ID is malformed
            StorageUnavailableError: If storage stays unavailable
        """
        voter = self.access_gate.require_viewer(request.viewer, "remove votes")
        question_id = parse_question_id(request.question_id)

        async def retract() -> UnvoteResponse:
            removed = await self.vote_service.retract_vote(question_id, voter)
            count = await self.vote_service.count_votes(question_id)
            return UnvoteResponse(
                question_id=str(question_id),
                voted=False,
                removed=removed,
                vote_count=count,
            )

        return await retry_idempotent(
            "unvote", retract, self.vote_settings.max_attempts
        )
