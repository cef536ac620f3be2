"""Vote domain service.

Owns the vote relation. Casting and retracting are idempotent toggles:
repeating either call leaves the same state as calling it once, so both are
safe under network retries and double submits.
"""

from datetime import datetime
from typing import Sequence
from uuid import UUID

import logfire

from senatus.domain.model.vote import Vote
from senatus.domain.repository import VoteRepository
from senatus.domain.value import QuestionId, User, parse_question_id

from .base import Service
from .question_service import QuestionService


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        question_service: QuestionService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            question_service: Question domain service
        """
        self.vote_repository = vote_repository
        self.question_service = question_service

    async def cast_vote(self, question_id: str | UUID, voter: User) -> Vote:
        """Vote for a question.

        Upsert semantics: if the voter already voted for the question the call
        succeeds without creating a duplicate.

        Args:
            question_id: Raw or parsed question ID
            voter: Voting user

        Returns:
            The stored vote

        Raises:
            InvalidReferenceError: If the question ID is malformed
            NotFoundError: If the question does not exist
        """
        parsed = parse_question_id(question_id)
        with logfire.span(
            "vote_service.cast_vote",
            question_id=str(parsed),
            voter_id=voter.external_id,
        ):
            # Questions are never deleted, so this check cannot go stale
            await self.question_service.get_question(parsed)

            vote = Vote(
                question_id=parsed,
                voter_id=voter.external_id,
                voter_display_name=voter.display_name,
                created_at=datetime.now(),
            )
            created = await self.vote_repository.upsert(vote)

            if created:
                logfire.info(
                    "Vote cast", question_id=str(parsed), voter_id=voter.external_id
                )
                return vote

            logfire.info(
                "Vote already present", question_id=str(parsed), voter_id=voter.external_id
            )
            existing = await self.vote_repository.find_by_key(parsed, voter.external_id)
            return existing or vote

    async def retract_vote(self, question_id: str | UUID, voter: User) -> bool:
        """Remove a vote from a question.

        Absent votes are a no-op, not an error.

        Args:
            question_id: Raw or parsed question ID
            voter: Voting user

        Returns:
            True if a vote was removed, False if none existed

        Raises:
            InvalidReferenceError: If the question ID is malformed
        """
        parsed = parse_question_id(question_id)
        with logfire.span(
            "vote_service.retract_vote",
            question_id=str(parsed),
            voter_id=voter.external_id,
        ):
            deleted = await self.vote_repository.delete_by_key(
                parsed, voter.external_id
            )

            if deleted:
                logfire.info(
                    "Vote retracted", question_id=str(parsed), voter_id=voter.external_id
                )
            else:
                logfire.info(
                    "No vote to retract",
                    question_id=str(parsed),
                    voter_id=voter.external_id,
                )

            return deleted

    async def count_votes(self, question_id: str | UUID) -> int:
        """Count distinct voters for a question.

        Raises:
            InvalidReferenceError: If the question ID is malformed
        """
        parsed = parse_question_id(question_id)
        with logfire.span("vote_service.count_votes", question_id=str(parsed)):
            return await self.vote_repository.count_by_question(parsed)

    async def has_voted(self, question_id: str | UUID, voter_id: str) -> bool:
        """Check whether a voter currently has a vote on a question.

        Raises:
            InvalidReferenceError: If the question ID is malformed
        """
        parsed = parse_question_id(question_id)
        with logfire.span(
            "vote_service.has_voted", question_id=str(parsed), voter_id=voter_id
        ):
            vote = await self.vote_repository.find_by_key(parsed, voter_id)
            return vote is not None

    async def count_votes_for(
        self, question_ids: Sequence[QuestionId]
    ) -> dict[QuestionId, int]:
        """Count votes for several questions in a single read.

        Args:
            question_ids: Question IDs

        Returns:
            Mapping of each ID to its vote count
        """
        if not question_ids:
            return {}

        with logfire.span("vote_service.count_votes_for", count=len(question_ids)):
            return await self.vote_repository.count_by_questions(question_ids)

    async def voted_questions(
        self, voter_id: str, question_ids: Sequence[QuestionId]
    ) -> set[QuestionId]:
        """Find which of the given questions a voter has voted on.

        Args:
            voter_id: External identity of the voter
            question_ids: Question IDs to check

        Returns:
            Set of voted question IDs
        """
        if not question_ids:
            return set()

        with logfire.span(
            "vote_service.voted_questions", voter_id=voter_id, count=len(question_ids)
        ):
            return await self.vote_repository.find_voted_questions(
                voter_id, question_ids
            )
