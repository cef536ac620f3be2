"""Topic repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from senatus.domain.model.topic import Topic
from senatus.domain.value import TopicId


class TopicRepository(ABC):
    """Repository for Topic aggregate.

    Defines the contract for topic persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, topic_id: TopicId) -> Optional[Topic]:
        """Find a topic by ID.

        Args:
            topic_id: The topic's unique identifier

        Returns:
            The topic if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_author(self, author_id: str) -> List[Topic]:
        """Find topics created by an author, newest first.

        Args:
            author_id: External identity of the author

        Returns:
            List of topics by the author
        """
        pass

    @abstractmethod
    async def save(self, topic: Topic) -> Topic:
        """Save a new topic.

        Args:
            topic: The topic to save

        Returns:
            The saved topic
        """
        pass
