"""In-memory repository implementations for testing."""

from .question import InMemoryQuestionRepository
from .topic import InMemoryTopicRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryQuestionRepository",
    "InMemoryTopicRepository",
    "InMemoryVoteRepository",
]
