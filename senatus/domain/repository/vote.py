"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, Optional, Sequence, Set

from senatus.domain.model.vote import Vote
from senatus.domain.value import QuestionId


class VoteRepository(ABC):
    """Repository for Vote entity.

    The only writer of the vote relation. Both write operations are single
    atomic statements keyed on (question_id, voter_id); implementations must
    never read first and then decide whether to write.
    """

    @abstractmethod
    async def upsert(self, vote: Vote) -> bool:
        """Insert a vote unless one already exists for the same key.

        Args:
            vote: The vote to record

        Returns:
            True if a row was created, False if the vote already existed
        """
        pass

    @abstractmethod
    async def delete_by_key(self, question_id: QuestionId, voter_id: str) -> bool:
        """Delete the vote for a (question, voter) pair if present.

        Args:
            question_id: ID of the question
            voter_id: External identity of the voter

        Returns:
            True if a vote was deleted, False if no vote existed
        """
        pass

    @abstractmethod
    async def find_by_key(
        self, question_id: QuestionId, voter_id: str
    ) -> Optional[Vote]:
        """Find the vote for a (question, voter) pair.

        Args:
            question_id: ID of the question
            voter_id: External identity of the voter

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def count_by_question(self, question_id: QuestionId) -> int:
        """Count votes on a question.

        Args:
            question_id: ID of the question

        Returns:
            Number of distinct voters
        """
        pass

    @abstractmethod
    async def count_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> Dict[QuestionId, int]:
        """Count votes on several questions in one read (batch query).

        Args:
            question_ids: IDs of the questions

        Returns:
            Mapping of every requested ID to its vote count (0 when unvoted)
        """
        pass

    @abstractmethod
    async def find_voted_questions(
        self, voter_id: str, question_ids: Sequence[QuestionId]
    ) -> Set[QuestionId]:
        """Find which of the given questions a voter has voted on (batch query).

        Args:
            voter_id: External identity of the voter
            question_ids: IDs of the questions to check

        Returns:
            Subset of question_ids carrying a vote from the voter
        """
        pass
