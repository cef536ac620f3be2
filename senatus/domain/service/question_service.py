"""Question domain service."""

from datetime import datetime
from uuid import UUID, uuid4

import logfire

from senatus.domain.error import NotFoundError, ValidationError
from senatus.domain.model.question import Question
from senatus.domain.repository import QuestionRepository
from senatus.domain.value import QuestionId, User, parse_question_id, parse_topic_id

from .base import Service
from .topic_service import TopicService


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(
        self, question_repository: QuestionRepository, topic_service: TopicService
    ) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
            topic_service: Topic domain service
        """
        self.question_repository = question_repository
        self.topic_service = topic_service

    async def create_question(
        self, topic_id: str | UUID, text: str, author: User
    ) -> Question:
        """Post a question under an existing topic.

        Args:
            topic_id: Raw or parsed topic ID
            text: Question text (surrounding whitespace is stripped)
            author: Posting user

        Returns:
            Saved question

        Raises:
            ValidationError: If the text is empty after stripping
            InvalidReferenceError: If the topic ID is malformed
            NotFoundError: If the topic does not exist
        """
        with logfire.span(
            "question_service.create_question",
            topic_id=str(topic_id),
            author_id=author.external_id,
        ):
            if not text or not text.strip():
                logfire.warn(
                    "Question rejected: empty text", author_id=author.external_id
                )
                raise ValidationError("Question must be provided")

            topic = await self.topic_service.get_topic(topic_id)

            try:
                question = Question(
                    id=QuestionId(uuid4()),
                    topic_id=topic.id,
                    text=text,
                    author=author,
                    created_at=datetime.now(),
                )
            except ValueError as e:
                raise ValidationError(str(e)) from e

            saved = await self.question_repository.save(question)
            logfire.info(
                "Question created", question_id=str(saved.id), topic_id=str(topic.id)
            )
            return saved

    async def get_question(self, question_id: str | UUID) -> Question:
        """Get a question by ID.

        Raises:
            InvalidReferenceError: If the ID is malformed
            NotFoundError: If no such question exists
        """
        parsed = parse_question_id(question_id)
        with logfire.span("question_service.get_question", question_id=str(parsed)):
            question = await self.question_repository.find_by_id(parsed)
            if question is None:
                logfire.warn("Question not found", question_id=str(parsed))
                raise NotFoundError("Question", str(parsed))
            return question

    async def list_questions_for_topic(self, topic_id: str | UUID) -> list[Question]:
        """List a topic's questions, unranked.

        Args:
            topic_id: Raw or parsed topic ID

        Returns:
            Questions in storage order

        Raises:
            InvalidReferenceError: If the topic ID is malformed
        """
        parsed = parse_topic_id(topic_id)
        with logfire.span(
            "question_service.list_questions_for_topic", topic_id=str(parsed)
        ):
            questions = await self.question_repository.find_by_topic(parsed)
            logfire.info("Questions listed", topic_id=str(parsed), count=len(questions))
            return questions
