"""Ranking domain service.

Turns a topic's stored questions into the ordered list shown to a viewer:
vote count descending, then newest first among equally voted questions.
"""

from typing import Awaitable, Callable, Sequence, TypeVar

import logfire

from senatus.domain.error import StorageUnavailableError
from senatus.domain.model.question import Question, RankedQuestion
from senatus.domain.value import QuestionId, User

from .access_gate import AccessGate
from .base import Service
from .vote_service import VoteService

T = TypeVar("T")


def display_order(questions: Sequence[RankedQuestion]) -> list[RankedQuestion]:
    """Sort ranked questions for display.

    Primary key vote_count descending, tie-break created_at descending.
    sorted() is stable (also with reverse=True), so exact duplicates keep
    their input order.
    """
    return sorted(questions, key=lambda q: (q.vote_count, q.created_at), reverse=True)


class RankingService(Service):
    """Domain service producing ranked question listings.

    Read-only over the vote relation. Vote data is fetched with one batched
    read per aggregate (a single snapshot). If a batched read fails, each
    question is looked up individually and questions whose lookup fails are
    omitted from the result instead of failing the whole listing.
    """

    def __init__(self, vote_service: VoteService, access_gate: AccessGate) -> None:
        """Initialize ranking service.

        Args:
            vote_service: Vote domain service
            access_gate: Access gate for vote eligibility
        """
        self.vote_service = vote_service
        self.access_gate = access_gate

    async def rank(
        self, questions: Sequence[Question], viewer: User | None = None
    ) -> list[RankedQuestion]:
        """Rank questions for a viewer.

        Args:
            questions: Stored questions (any order)
            viewer: Current identity, None for anonymous viewers

        Returns:
            Ranked questions with vote_count and viewer_can_vote populated

        Raises:
            StorageUnavailableError: If no question's vote count could be read
        """
        with logfire.span(
            "ranking_service.rank",
            question_count=len(questions),
            has_viewer=viewer is not None,
        ):
            if not questions:
                return []

            question_ids = [q.id for q in questions]
            counts = await self._vote_counts(question_ids)
            if not counts:
                logfire.error(
                    "Vote counts unavailable for every question",
                    question_count=len(questions),
                )
                raise StorageUnavailableError("rank", "no vote counts could be read")

            can_vote = self.access_gate.can_vote(viewer)
            voted: dict[QuestionId, bool] = {}
            if viewer is not None:
                voted = await self._viewer_votes(viewer, list(counts))

            ranked = []
            for question in questions:
                if question.id not in counts:
                    continue
                if can_vote and question.id not in voted:
                    continue
                ranked.append(
                    RankedQuestion.from_question(
                        question,
                        vote_count=counts[question.id],
                        viewer_can_vote=can_vote and not voted[question.id],
                    )
                )

            omitted = len(questions) - len(ranked)
            if omitted:
                logfire.warn(
                    "Questions omitted from ranking",
                    omitted=omitted,
                    question_count=len(questions),
                )

            return display_order(ranked)

    async def _vote_counts(
        self, question_ids: list[QuestionId]
    ) -> dict[QuestionId, int]:
        try:
            return await self.vote_service.count_votes_for(question_ids)
        except StorageUnavailableError as e:
            logfire.warn("Batch vote count failed, counting per question", error=str(e))

        return await self._per_question(question_ids, self.vote_service.count_votes)

    async def _viewer_votes(
        self, viewer: User, question_ids: list[QuestionId]
    ) -> dict[QuestionId, bool]:
        try:
            voted = await self.vote_service.voted_questions(
                viewer.external_id, question_ids
            )
            return {qid: qid in voted for qid in question_ids}
        except StorageUnavailableError as e:
            logfire.warn("Batch viewer vote lookup failed", error=str(e))

        async def lookup(question_id: QuestionId) -> bool:
            return await self.vote_service.has_voted(question_id, viewer.external_id)

        return await self._per_question(question_ids, lookup)

    async def _per_question(
        self,
        question_ids: list[QuestionId],
        lookup: Callable[[QuestionId], Awaitable[T]],
    ) -> dict[QuestionId, T]:
        results: dict[QuestionId, T] = {}
        for question_id in question_ids:
            try:
                results[question_id] = await lookup(question_id)
            except StorageUnavailableError as e:
                logfire.warn(
                    "Vote lookup failed, omitting question",
                    question_id=str(question_id),
                    error=str(e),
                )
        return results
