"""Domain value objects for Senatus."""

from senatus.domain.value.identifiers import (
    QuestionId,
    TopicId,
    parse_question_id,
    parse_topic_id,
)
from senatus.domain.value.types import User

__all__ = [
    # Identifiers
    "TopicId",
    "QuestionId",
    "parse_topic_id",
    "parse_question_id",
    # Types
    "User",
]
