"""Create topic use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from senatus.domain.service import AccessGate, TopicService
from senatus.domain.value import User


class CreateTopicRequest(BaseModel):
    """Create topic request."""

    name: str
    description: str = ""
    viewer: User | None = None  # Authenticated user, if any


class CreateTopicResponse(BaseModel):
    """Create topic response."""

    topic_id: str
    name: str
    description: str
    author_name: str
    created_at: datetime


class CreateTopicUseCase:
    """Use case for creating a new topic."""

    def __init__(self, topic_service: TopicService, access_gate: AccessGate) -> None:
        """Initialize create topic use case.

        Args:
            topic_service: Topic domain service
            access_gate: Access gate
        """
        self.topic_service = topic_service
        self.access_gate = access_gate

    async def execute(self, request: CreateTopicRequest) -> CreateTopicResponse:
        """Execute create topic flow.

        Never retried: a repeated create would produce a duplicate topic.

        Raises:
            NotAuthenticatedError: If there is no viewer
            ValidationError: If the name is empty
        """
        author = self.access_gate.require_viewer(request.viewer, "create topics")

        topic = await self.topic_service.create_topic(
            request.name, request.description, author
        )
        logfire.info("Topic created via use case", topic_id=str(topic.id))

        return CreateTopicResponse(
            topic_id=str(topic.id),
            name=topic.name,
            description=topic.description,
            author_name=topic.author.display_name,
            created_at=topic.created_at,
        )
