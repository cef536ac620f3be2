"""PostgreSQL implementation of Topic repository."""

from typing import List, Optional

import logfire
from sqlalchemy import desc, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from senatus.domain.model import Topic
from senatus.domain.repository import TopicRepository
from senatus.domain.value import TopicId
from senatus.persistence.database import storage_errors
from senatus.persistence.mappers import row_to_topic, topic_to_dict
from senatus.persistence.tables import topics_table


class PostgresTopicRepository(TopicRepository):
    """PostgreSQL implementation of TopicRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, topic_id: TopicId) -> Optional[Topic]:
        """Find a topic by ID."""
        async with storage_errors(self.session, "topic.find_by_id"):
            stmt = select(topics_table).where(topics_table.c.id == topic_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_topic(row._asdict()) if row else None

    async def find_by_author(self, author_id: str) -> List[Topic]:
        """Find topics by author, newest first."""
        with logfire.span("topic_repository.find_by_author", author_id=author_id):
            async with storage_errors(self.session, "topic.find_by_author"):
                stmt = (
                    select(topics_table)
                    .where(topics_table.c.author_external_id == author_id)
                    .order_by(desc(topics_table.c.created_at), topics_table.c.id)
                )
                result = await self.session.execute(stmt)
                return [row_to_topic(row._asdict()) for row in result.fetchall()]

    async def save(self, topic: Topic) -> Topic:
        """Insert a new topic."""
        async with storage_errors(self.session, "topic.save"):
            stmt = insert(topics_table).values(**topic_to_dict(topic))
            await self.session.execute(stmt)
            await self.session.flush()
            return topic
