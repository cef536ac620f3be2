"""Strongly typed identifiers for Senatus domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

from senatus.domain.error import InvalidReferenceError

TopicId = NewType("TopicId", UUID)
QuestionId = NewType("QuestionId", UUID)


def _parse_uuid(resource: str, value: str | UUID) -> UUID:
    if isinstance(value, UUID):
        return value
    try:
        return UUID(value)
    except (ValueError, TypeError, AttributeError):
        raise InvalidReferenceError(resource, str(value))


def parse_topic_id(value: str | UUID) -> TopicId:
    """Parse a raw topic identifier.

    Raises:
        InvalidReferenceError: If the value is not a valid UUID
    """
    return TopicId(_parse_uuid("topic", value))


def parse_question_id(value: str | UUID) -> QuestionId:
    """Parse a raw question identifier.

    Raises:
        InvalidReferenceError: If the value is not a valid UUID
    """
    return QuestionId(_parse_uuid("question", value))
