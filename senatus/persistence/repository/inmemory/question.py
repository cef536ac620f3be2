"""In-memory question repository for testing."""

from typing import Optional

from senatus.domain.model.question import Question
from senatus.domain.repository.question import QuestionRepository
from senatus.domain.value import QuestionId, TopicId


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self) -> None:
        self._questions: dict[QuestionId, Question] = {}

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        return self._questions.get(question_id)

    async def find_by_topic(self, topic_id: TopicId) -> list[Question]:
        """Find a topic's questions ordered by created_at, then id."""
        questions = [q for q in self._questions.values() if q.topic_id == topic_id]
        questions.sort(key=lambda q: (q.created_at, str(q.id)))
        return questions

    async def save(self, question: Question) -> Question:
        """Save a question."""
        self._questions[question.id] = question
        return question
