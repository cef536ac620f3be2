"""Topic domain service."""

from datetime import datetime
from uuid import UUID, uuid4

import logfire

from senatus.domain.error import NotFoundError, ValidationError
from senatus.domain.model.topic import Topic
from senatus.domain.repository import TopicRepository
from senatus.domain.value import TopicId, User, parse_topic_id

from .base import Service


class TopicService(Service):
    """Domain service for topic operations."""

    def __init__(self, topic_repository: TopicRepository) -> None:
        """Initialize topic service.

        Args:
            topic_repository: Topic repository
        """
        self.topic_repository = topic_repository

    async def create_topic(self, name: str, description: str, author: User) -> Topic:
        """Create a topic.

        Not idempotent: every call creates a new topic, so callers must not
        retry it on storage failures.

        Args:
            name: Topic name (surrounding whitespace is stripped)
            description: Free-form description
            author: Creating user

        Returns:
            Saved topic

        Raises:
            ValidationError: If the name is empty after stripping
        """
        with logfire.span(
            "topic_service.create_topic", author_id=author.external_id, name=name
        ):
            if not name or not name.strip():
                logfire.warn("Topic rejected: empty name", author_id=author.external_id)
                raise ValidationError("Name must be provided")

            try:
                topic = Topic(
                    id=TopicId(uuid4()),
                    name=name,
                    description=(description or "").strip(),
                    author=author,
                    created_at=datetime.now(),
                )
            except ValueError as e:
                raise ValidationError(str(e)) from e

            saved = await self.topic_repository.save(topic)
            logfire.info("Topic created", topic_id=str(saved.id))
            return saved

    async def get_topic(self, topic_id: str | UUID) -> Topic:
        """Get a topic by ID.

        Args:
            topic_id: Raw or parsed topic ID

        Returns:
            The topic

        Raises:
            InvalidReferenceError: If the ID is malformed
            NotFoundError: If no such topic exists
        """
        parsed = parse_topic_id(topic_id)
        with logfire.span("topic_service.get_topic", topic_id=str(parsed)):
            topic = await self.topic_repository.find_by_id(parsed)
            if topic is None:
                logfire.warn("Topic not found", topic_id=str(parsed))
                raise NotFoundError("Topic", str(parsed))
            return topic

    async def list_topics_by_author(self, author: User) -> list[Topic]:
        """List topics created by a user, newest first.

        Args:
            author: The user whose topics to list

        Returns:
            List of topics
        """
        with logfire.span(
            "topic_service.list_topics_by_author", author_id=author.external_id
        ):
            topics = await self.topic_repository.find_by_author(author.external_id)
            logfire.info(
                "Topics listed", author_id=author.external_id, count=len(topics)
            )
            return topics
