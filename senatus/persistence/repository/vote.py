"""PostgreSQL implementation of Vote repository."""

from typing import Dict, Optional, Sequence, Set

import logfire
from sqlalchemy import and_, delete, func, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from senatus.domain.model import Vote
from senatus.domain.repository import VoteRepository
from senatus.domain.value import QuestionId
from senatus.persistence.database import storage_errors
from senatus.persistence.mappers import row_to_vote, vote_to_dict
from senatus.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository.

    Writes are single statements arbitrated by the (question_id, voter_id)
    primary key, so concurrent double votes collapse into one row.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _key(self, question_id: QuestionId, voter_id: str):
        return and_(
            votes_table.c.question_id == question_id,
            votes_table.c.voter_id == voter_id,
        )

    async def upsert(self, vote: Vote) -> bool:
        """Insert a vote, doing nothing if the key already exists."""
        async with storage_errors(self.session, "vote.upsert"):
            stmt = (
                pg_insert(votes_table)
                .values(**vote_to_dict(vote))
                .on_conflict_do_nothing(index_elements=["question_id", "voter_id"])
            )
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_key(self, question_id: QuestionId, voter_id: str) -> bool:
        """Delete a vote by its key."""
        async with storage_errors(self.session, "vote.delete_by_key"):
            stmt = delete(votes_table).where(self._key(question_id, voter_id))
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount > 0  # type: ignore[attr-defined]

    async def find_by_key(
        self, question_id: QuestionId, voter_id: str
    ) -> Optional[Vote]:
        """Find a vote by its key."""
        async with storage_errors(self.session, "vote.find_by_key"):
            stmt = select(votes_table).where(self._key(question_id, voter_id))
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_vote(row._asdict()) if row else None

    async def count_by_question(self, question_id: QuestionId) -> int:
        """Count votes on a question."""
        async with storage_errors(self.session, "vote.count_by_question"):
            stmt = (
                select(func.count())
                .select_from(votes_table)
                .where(votes_table.c.question_id == question_id)
            )
            result = await self.session.execute(stmt)
            return result.scalar() or 0

    async def count_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> Dict[QuestionId, int]:
        """Count votes on several questions with one grouped query."""
        if not question_ids:
            return {}

        with logfire.span("vote_repository.count_by_questions", count=len(question_ids)):
            async with storage_errors(self.session, "vote.count_by_questions"):
                stmt = (
                    select(votes_table.c.question_id, func.count().label("votes"))
                    .where(votes_table.c.question_id.in_(question_ids))
                    .group_by(votes_table.c.question_id)
                )
                result = await self.session.execute(stmt)
                counted = {row.question_id: row.votes for row in result.fetchall()}

        return {qid: counted.get(qid, 0) for qid in question_ids}

    async def find_voted_questions(
        self, voter_id: str, question_ids: Sequence[QuestionId]
    ) -> Set[QuestionId]:
        """Find which questions a voter has voted on (batch query)."""
        if not question_ids:
            return set()

        async with storage_errors(self.session, "vote.find_voted_questions"):
            stmt = select(votes_table.c.question_id).where(
                and_(
                    votes_table.c.voter_id == voter_id,
                    votes_table.c.question_id.in_(question_ids),
                )
            )
            result = await self.session.execute(stmt)
            return {QuestionId(row.question_id) for row in result.fetchall()}
