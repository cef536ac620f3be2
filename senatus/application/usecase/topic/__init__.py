"""Topic use cases."""

from .create_topic import CreateTopicRequest, CreateTopicResponse, CreateTopicUseCase
from .list_my_topics import (
    ListMyTopicsRequest,
    ListMyTopicsResponse,
    ListMyTopicsUseCase,
    TopicListItem,
)
from .view_topic import (
    RankedQuestionItem,
    ViewTopicRequest,
    ViewTopicResponse,
    ViewTopicUseCase,
)

__all__ = [
    "CreateTopicRequest",
    "CreateTopicResponse",
    "CreateTopicUseCase",
    "ListMyTopicsRequest",
    "ListMyTopicsResponse",
    "ListMyTopicsUseCase",
    "TopicListItem",
    "RankedQuestionItem",
    "ViewTopicRequest",
    "ViewTopicResponse",
    "ViewTopicUseCase",
]
