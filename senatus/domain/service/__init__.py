"""Domain services."""

from .access_gate import AccessGate
from .base import Service
from .jwt_service import JWTService
from .question_service import QuestionService
from .ranking_service import RankingService, display_order
from .topic_service import TopicService
from .vote_service import VoteService

__all__ = [
    "AccessGate",
    "JWTService",
    "QuestionService",
    "RankingService",
    "Service",
    "TopicService",
    "VoteService",
    "display_order",
]
