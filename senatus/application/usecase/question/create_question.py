"""Create question use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from senatus.domain.service import AccessGate, QuestionService
from senatus.domain.value import User


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    topic_id: str  # UUID string from the path
    text: str
    viewer: User | None = None


class CreateQuestionResponse(BaseModel):
    """Create question response."""

    question_id: str
    topic_id: str
    text: str
    author_name: str
    created_at: datetime


class CreateQuestionUseCase:
    """Use case for asking a question within a topic."""

    def __init__(
        self, question_service: QuestionService, access_gate: AccessGate
    ) -> None:
        """Initialize create question use case.

        Args:
            question_service: Question domain service
            access_gate: Access gate
        """
        self.question_service = question_service
        self.access_gate = access_gate

    async def execute(self, request: CreateQuestionRequest) -> CreateQuestionResponse:
        """Execute create question flow.

        Raises:
            NotAuthenticatedError: If there is no viewer
            ValidationError: If the text is empty
            InvalidReferenceError: If the topic ID is malformed
            NotFoundError: If the topic does not exist
        """
        author = self.access_gate.require_viewer(request.viewer, "ask questions")

        question = await self.question_service.create_question(
            request.topic_id, request.text, author
        )
        logfire.info(
            "Question created via use case",
            question_id=str(question.id),
            topic_id=str(question.topic_id),
        )

        return CreateQuestionResponse(
            question_id=str(question.id),
            topic_id=str(question.topic_id),
            text=question.text,
            author_name=question.author.display_name,
            created_at=question.created_at,
        )
