"""Application layer DI providers."""

from dishka import Scope, provide

from senatus.application.usecase.auth import GetCurrentViewerUseCase
from senatus.application.usecase.question import CreateQuestionUseCase
from senatus.application.usecase.topic import (
    CreateTopicUseCase,
    ListMyTopicsUseCase,
    ViewTopicUseCase,
)
from senatus.application.usecase.vote import UnvoteUseCase, VoteUseCase
from senatus.config import VoteSettings
from senatus.domain.service import (
    AccessGate,
    JWTService,
    QuestionService,
    RankingService,
    TopicService,
    VoteService,
)
from senatus.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_current_viewer_use_case(
        self, jwt_service: JWTService
    ) -> GetCurrentViewerUseCase:
        """Provide get current viewer use case."""
        return GetCurrentViewerUseCase(jwt_service=jwt_service)

    # Topic use cases
    @provide(scope=Scope.REQUEST)
    def get_create_topic_use_case(
        self, topic_service: TopicService, access_gate: AccessGate
    ) -> CreateTopicUseCase:
        """Provide create topic use case."""
        return CreateTopicUseCase(topic_service=topic_service, access_gate=access_gate)

    @provide(scope=Scope.REQUEST)
    def get_list_my_topics_use_case(
        self, topic_service: TopicService, access_gate: AccessGate
    ) -> ListMyTopicsUseCase:
        """Provide list my topics use case."""
        return ListMyTopicsUseCase(
            topic_service=topic_service, access_gate=access_gate
        )

    @provide(scope=Scope.REQUEST)
    def get_view_topic_use_case(
        self,
        topic_service: TopicService,
        question_service: QuestionService,
        ranking_service: RankingService,
        access_gate: AccessGate,
        vote_settings: VoteSettings,
    ) -> ViewTopicUseCase:
        """Provide view topic use case."""
        return ViewTopicUseCase(
            topic_service=topic_service,
            question_service=question_service,
            ranking_service=ranking_service,
            access_gate=access_gate,
            vote_settings=vote_settings,
        )

    # Question use cases
    @provide(scope=Scope.REQUEST)
    def get_create_question_use_case(
        self, question_service: QuestionService, access_gate: AccessGate
    ) -> CreateQuestionUseCase:
        """Provide create question use case."""
        return CreateQuestionUseCase(
            question_service=question_service, access_gate=access_gate
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_vote_use_case(
        self,
        vote_service: VoteService,
        access_gate: AccessGate,
        vote_settings: VoteSettings,
    ) -> VoteUseCase:
        """Provide vote use case."""
        return VoteUseCase(
            vote_service=vote_service,
            access_gate=access_gate,
            vote_settings=vote_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_unvote_use_case(
        self,
        vote_service: VoteService,
        access_gate: AccessGate,
        vote_settings: VoteSettings,
    ) -> UnvoteUseCase:
        """Provide unvote use case."""
        return UnvoteUseCase(
            vote_service=vote_service,
            access_gate=access_gate,
            vote_settings=vote_settings,
        )
