"""PostgreSQL repository implementations."""

from senatus.persistence.repository.question import PostgresQuestionRepository
from senatus.persistence.repository.topic import PostgresTopicRepository
from senatus.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresTopicRepository",
    "PostgresQuestionRepository",
    "PostgresVoteRepository",
]
