"""Question repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from senatus.domain.model.question import Question
from senatus.domain.value import QuestionId, TopicId


class QuestionRepository(ABC):
    """Repository for Question entity."""

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_topic(self, topic_id: TopicId) -> List[Question]:
        """Find all questions posted under a topic.

        Results are unranked but in a fixed order (created_at, then id) so
        that repeated reads of unchanged data return the same sequence.

        Args:
            topic_id: The topic's ID

        Returns:
            List of questions for the topic
        """
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a new question.

        Args:
            question: The question to save

        Returns:
            The saved question
        """
        pass
