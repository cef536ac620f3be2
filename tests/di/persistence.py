"""Mock persistence providers for testing."""

from dishka import Scope, provide

from senatus.domain.repository import (
    QuestionRepository,
    TopicRepository,
    VoteRepository,
)
from senatus.persistence.repository.inmemory import (
    InMemoryQuestionRepository,
    InMemoryTopicRepository,
    InMemoryVoteRepository,
)
from senatus.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so state survives across requests of one
    container (needed by E2E flows). Every test builds its own container, so
    tests stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_topic_repository(self) -> TopicRepository:
        """Provide in-memory topic repository."""
        return InMemoryTopicRepository()

    @provide(scope=Scope.APP)
    def get_question_repository(self) -> QuestionRepository:
        """Provide in-memory question repository."""
        return InMemoryQuestionRepository()

    @provide(scope=Scope.APP)
    def get_vote_repository(self) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository()
