"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping. Author snapshots are
flattened into author_external_id / author_display_name columns.
"""

from typing import Any, Dict
from uuid import UUID

from senatus.domain.model import Question, Topic, Vote
from senatus.domain.value import QuestionId, TopicId, User


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _author(row: Dict[str, Any]) -> User:
    return User(
        external_id=row["author_external_id"],
        display_name=row["author_display_name"],
    )


def row_to_topic(row: Dict[str, Any]) -> Topic:
    """Convert database row to Topic domain model.

    Args:
        row: Database row as dict

    Returns:
        Topic domain model
    """
    return Topic(
        id=TopicId(_uuid(row["id"])),
        name=row["name"],
        description=row.get("description") or "",
        author=_author(row),
        created_at=row["created_at"],
    )


def topic_to_dict(topic: Topic) -> Dict[str, Any]:
    """Convert Topic domain model to database dict.

    Args:
        topic: Topic domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": topic.id,
        "name": topic.name,
        "description": topic.description,
        "author_external_id": topic.author.external_id,
        "author_display_name": topic.author.display_name,
        "created_at": topic.created_at,
    }


def row_to_question(row: Dict[str, Any]) -> Question:
    """Convert database row to Question domain model.

    Args:
        row: Database row as dict

    Returns:
        Question domain model
    """
    return Question(
        id=QuestionId(_uuid(row["id"])),
        topic_id=TopicId(_uuid(row["topic_id"])),
        text=row["text"],
        author=_author(row),
        created_at=row["created_at"],
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to database dict.

    Args:
        question: Question domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": question.id,
        "topic_id": question.topic_id,
        "text": question.text,
        "author_external_id": question.author.external_id,
        "author_display_name": question.author.display_name,
        "created_at": question.created_at,
    }


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        question_id=QuestionId(_uuid(row["question_id"])),
        voter_id=row["voter_id"],
        voter_display_name=row.get("voter_display_name") or "",
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict.

    Args:
        vote: Vote domain model

    Returns:
        Dict suitable for database insertion
    """
    return vote.model_dump()
