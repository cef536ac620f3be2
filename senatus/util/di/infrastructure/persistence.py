"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from senatus.config import Settings
from senatus.domain.repository import (
    QuestionRepository,
    TopicRepository,
    VoteRepository,
)
from senatus.persistence.database import create_engine, create_session_factory
from senatus.persistence.repository import (
    PostgresQuestionRepository,
    PostgresTopicRepository,
    PostgresVoteRepository,
)
from senatus.util.di.base import ProviderBase
from senatus.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL.

    The engine is created once per process and owned by the container; each
    request gets its own session and therefore its own transaction.
    """

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is committed at the end of the request if no exception
        occurred, or rolled back if an exception was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.debug("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_topic_repository(self, session: AsyncSession) -> TopicRepository:
        """Provide Topic repository."""
        return PostgresTopicRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_question_repository(self, session: AsyncSession) -> QuestionRepository:
        """Provide Question repository."""
        return PostgresQuestionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        """Provide Vote repository."""
        return PostgresVoteRepository(session)
