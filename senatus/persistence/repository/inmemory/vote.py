"""In-memory vote repository for testing."""

from typing import Optional, Sequence

from senatus.domain.model.vote import Vote
from senatus.domain.repository.vote import VoteRepository
from senatus.domain.value import QuestionId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Votes are keyed by (question_id, voter_id). Each write is a single dict
    operation with no await in between, which makes it atomic on the event
    loop.
    """

    def __init__(self) -> None:
        self._votes: dict[tuple[QuestionId, str], Vote] = {}

    async def upsert(self, vote: Vote) -> bool:
        """Insert a vote unless one already exists for the key."""
        stored = self._votes.setdefault((vote.question_id, vote.voter_id), vote)
        return stored is vote

    async def delete_by_key(self, question_id: QuestionId, voter_id: str) -> bool:
        """Delete a vote by key."""
        return self._votes.pop((question_id, voter_id), None) is not None

    async def find_by_key(
        self, question_id: QuestionId, voter_id: str
    ) -> Optional[Vote]:
        """Find a vote by key."""
        return self._votes.get((question_id, voter_id))

    async def count_by_question(self, question_id: QuestionId) -> int:
        """Count votes on a question."""
        return sum(1 for qid, _ in self._votes if qid == question_id)

    async def count_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> dict[QuestionId, int]:
        """Count votes on several questions."""
        counts = {qid: 0 for qid in question_ids}
        for qid, _ in self._votes:
            if qid in counts:
                counts[qid] += 1
        return counts

    async def find_voted_questions(
        self, voter_id: str, question_ids: Sequence[QuestionId]
    ) -> set[QuestionId]:
        """Find which questions a voter has voted on."""
        wanted = set(question_ids)
        return {qid for qid, vid in self._votes if vid == voter_id and qid in wanted}
