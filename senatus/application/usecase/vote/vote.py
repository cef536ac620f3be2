"""Vote use case."""

from pydantic import BaseModel

from senatus.application.usecase.retry import retry_idempotent
from senatus.config import VoteSettings
from senatus.domain.service import AccessGate, VoteService
from senatus.domain.value import User


class VoteRequest(BaseModel):
    """Vote request."""

    question_id: str  # UUID string from the path
    viewer: User | None = None


class VoteResponse(BaseModel):
    """Vote state after the operation."""

    question_id: str
    voted: bool
    vote_count: int


class VoteUseCase:
    """Use case for voting on a question."""

    def __init__(
        self,
        vote_service: VoteService,
        access_gate: AccessGate,
        vote_settings: VoteSettings,
    ) -> None:
        """Initialize vote use case.

        Args:
            vote_service: Vote domain service
            access_gate: Access gate
            vote_settings: Retry configuration
        """
        self.vote_service = vote_service
        self.access_gate = access_gate
        self.vote_settings = vote_settings

    async def execute(self, request: VoteRequest) -> VoteResponse:
        """Execute vote flow.

        Casting is idempotent, so a transient storage failure is retried.

        Raises:
            NotAuthenticatedError: If there is no viewer
            InvalidReferenceError: If the question ID is malformed
            NotFoundError: If the question does not exist
            StorageUnavailableError: If storage stays unavailable
        """
        voter = self.access_gate.require_viewer(request.viewer, "vote")

        async def cast() -> VoteResponse:
            vote = await self.vote_service.cast_vote(request.question_id, voter)
            count = await self.vote_service.count_votes(vote.question_id)
            return VoteResponse(
                question_id=str(vote.question_id), voted=True, vote_count=count
            )

        return await retry_idempotent("vote", cast, self.vote_settings.max_attempts)
