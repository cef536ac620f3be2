"""List my topics use case."""

from datetime import datetime

from pydantic import BaseModel

from senatus.domain.service import AccessGate, TopicService
from senatus.domain.value import User


class TopicListItem(BaseModel):
    """Topic list item in response."""

    topic_id: str
    name: str
    description: str
    author_name: str
    created_at: datetime


class ListMyTopicsRequest(BaseModel):
    """List my topics request."""

    viewer: User | None = None


class ListMyTopicsResponse(BaseModel):
    """List my topics response."""

    topics: list[TopicListItem]


class ListMyTopicsUseCase:
    """Use case for listing the topics the viewer created."""

    def __init__(self, topic_service: TopicService, access_gate: AccessGate) -> None:
        self.topic_service = topic_service
        self.access_gate = access_gate

    async def execute(self, request: ListMyTopicsRequest) -> ListMyTopicsResponse:
        """Execute list my topics flow.

        Raises:
            NotAuthenticatedError: If there is no viewer
        """
        viewer = self.access_gate.require_viewer(request.viewer, "list your topics")
        topics = await self.topic_service.list_topics_by_author(viewer)

        return ListMyTopicsResponse(
            topics=[
                TopicListItem(
                    topic_id=str(topic.id),
                    name=topic.name,
                    description=topic.description,
                    author_name=topic.author.display_name,
                    created_at=topic.created_at,
                )
                for topic in topics
            ]
        )
