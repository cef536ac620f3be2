"""Domain layer DI providers."""

from dishka import Scope, provide

from senatus.config import AuthSettings
from senatus.domain.repository import (
    QuestionRepository,
    TopicRepository,
    VoteRepository,
)
from senatus.domain.service import (
    AccessGate,
    JWTService,
    QuestionService,
    RankingService,
    TopicService,
    VoteService,
)
from senatus.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_access_gate(self) -> AccessGate:
        """Provide the stateless access gate."""
        return AccessGate()

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_topic_service(self, topic_repository: TopicRepository) -> TopicService:
        """Provide topic domain service."""
        return TopicService(topic_repository=topic_repository)

    @provide
    def get_question_service(
        self, question_repository: QuestionRepository, topic_service: TopicService
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(
            question_repository=question_repository, topic_service=topic_service
        )

    @provide
    def get_vote_service(
        self, vote_repository: VoteRepository, question_service: QuestionService
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository, question_service=question_service
        )

    @provide
    def get_ranking_service(
        self, vote_service: VoteService, access_gate: AccessGate
    ) -> RankingService:
        """Provide ranking domain service."""
        return RankingService(vote_service=vote_service, access_gate=access_gate)
