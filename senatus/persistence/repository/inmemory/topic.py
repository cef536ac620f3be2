"""In-memory topic repository for testing."""

from typing import Optional

from senatus.domain.model.topic import Topic
from senatus.domain.repository.topic import TopicRepository
from senatus.domain.value import TopicId


class InMemoryTopicRepository(TopicRepository):
    """In-memory implementation of TopicRepository for testing."""

    def __init__(self) -> None:
        self._topics: dict[TopicId, Topic] = {}

    async def find_by_id(self, topic_id: TopicId) -> Optional[Topic]:
        """Find a topic by ID."""
        return self._topics.get(topic_id)

    async def find_by_author(self, author_id: str) -> list[Topic]:
        """Find topics by author, newest first."""
        topics = [t for t in self._topics.values() if t.author.external_id == author_id]
        topics.sort(key=lambda t: t.created_at, reverse=True)
        return topics

    async def save(self, topic: Topic) -> Topic:
        """Save a topic."""
        self._topics[topic.id] = topic
        return topic
