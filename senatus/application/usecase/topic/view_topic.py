"""View topic use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from senatus.application.usecase.retry import retry_idempotent
from senatus.config import VoteSettings
from senatus.domain.service import (
    AccessGate,
    QuestionService,
    RankingService,
    TopicService,
)
from senatus.domain.value import User


class RankedQuestionItem(BaseModel):
    """Ranked question in response."""

    question_id: str
    text: str
    author_name: str
    created_at: datetime
    vote_count: int
    viewer_can_vote: bool
    belongs_to_viewer: bool


class ViewTopicRequest(BaseModel):
    """View topic request."""

    topic_id: str
    viewer: User | None = None


class ViewTopicResponse(BaseModel):
    """View topic response."""

    topic_id: str
    name: str
    description: str
    author_name: str
    created_at: datetime
    logged_in: bool
    questions: list[RankedQuestionItem]


class ViewTopicUseCase:
    """Use case for displaying a topic with its ranked questions."""

    def __init__(
        self,
        topic_service: TopicService,
        question_service: QuestionService,
        ranking_service: RankingService,
        access_gate: AccessGate,
        vote_settings: VoteSettings,
    ) -> None:
        """Initialize view topic use case.

        Args:
            topic_service: Topic domain service
            question_service: Question domain service
            ranking_service: Ranking domain service
            access_gate: Access gate for ownership flags
            vote_settings: Retry configuration
        """
        self.topic_service = topic_service
        self.question_service = question_service
        self.ranking_service = ranking_service
        self.access_gate = access_gate
        self.vote_settings = vote_settings

    async def execute(self, request: ViewTopicRequest) -> ViewTopicResponse:
        """Execute view topic flow.

        Steps:
        1. Fetch the topic (InvalidReferenceError / NotFoundError)
        2. List its raw questions
        3. Rank them for the viewer
        4. Flag the viewer's own questions

        Read-only, so transient storage failures are retried.
        """
        with logfire.span(
            "view_topic.execute",
            topic_id=request.topic_id,
            has_viewer=request.viewer is not None,
        ):
            return await retry_idempotent(
                "view_topic",
                lambda: self._view(request),
                self.vote_settings.max_attempts,
            )

    async def _view(self, request: ViewTopicRequest) -> ViewTopicResponse:
        topic = await self.topic_service.get_topic(request.topic_id)
        questions = await self.question_service.list_questions_for_topic(topic.id)
        ranked = await self.ranking_service.rank(questions, request.viewer)

        return ViewTopicResponse(
            topic_id=str(topic.id),
            name=topic.name,
            description=topic.description,
            author_name=topic.author.display_name,
            created_at=topic.created_at,
            logged_in=request.viewer is not None,
            questions=[
                RankedQuestionItem(
                    question_id=str(question.id),
                    text=question.text,
                    author_name=question.author.display_name,
                    created_at=question.created_at,
                    vote_count=question.vote_count,
                    viewer_can_vote=question.viewer_can_vote,
                    belongs_to_viewer=self.access_gate.owns(question, request.viewer),
                )
                for question in ranked
            ],
        )
