"""PostgreSQL implementation of Question repository."""

from typing import List, Optional

import logfire
from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from senatus.domain.model import Question
from senatus.domain.repository import QuestionRepository
from senatus.domain.value import QuestionId, TopicId
from senatus.persistence.database import storage_errors
from senatus.persistence.mappers import question_to_dict, row_to_question
from senatus.persistence.tables import questions_table


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        async with storage_errors(self.session, "question.find_by_id"):
            stmt = select(questions_table).where(questions_table.c.id == question_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_question(row._asdict()) if row else None

    async def find_by_topic(self, topic_id: TopicId) -> List[Question]:
        """Find a topic's questions in storage order."""
        with logfire.span("question_repository.find_by_topic", topic_id=str(topic_id)):
            async with storage_errors(self.session, "question.find_by_topic"):
                stmt = (
                    select(questions_table)
                    .where(questions_table.c.topic_id == topic_id)
                    .order_by(questions_table.c.created_at, questions_table.c.id)
                )
                result = await self.session.execute(stmt)
                return [row_to_question(row._asdict()) for row in result.fetchall()]

    async def save(self, question: Question) -> Question:
        """Insert a new question."""
        async with storage_errors(self.session, "question.save"):
            stmt = insert(questions_table).values(**question_to_dict(question))
            await self.session.execute(stmt)
            await self.session.flush()
            return question
