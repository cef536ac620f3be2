"""Repository interfaces for Senatus domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from senatus.domain.repository.question import QuestionRepository
from senatus.domain.repository.topic import TopicRepository
from senatus.domain.repository.vote import VoteRepository

__all__ = [
    "TopicRepository",
    "QuestionRepository",
    "VoteRepository",
]
