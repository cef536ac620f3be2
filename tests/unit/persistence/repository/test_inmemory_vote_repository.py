"""Unit tests for the in-memory vote repository."""

from uuid import uuid4

import pytest

from senatus.domain.model.vote import Vote
from senatus.domain.value import QuestionId
from senatus.persistence.repository.inmemory import InMemoryVoteRepository


class TestInMemoryVoteRepository:
    @pytest.mark.asyncio
    async def test_upsert_reports_creation_once(self):
        repo = InMemoryVoteRepository()
        question_id = QuestionId(uuid4())

        assert await repo.upsert(Vote(question_id=question_id, voter_id="a")) is True
        assert await repo.upsert(Vote(question_id=question_id, voter_id="a")) is False
        assert await repo.count_by_question(question_id) == 1

    @pytest.mark.asyncio
    async def test_delete_by_key(self):
        repo = InMemoryVoteRepository()
        question_id = QuestionId(uuid4())
        await repo.upsert(Vote(question_id=question_id, voter_id="a"))

        assert await repo.delete_by_key(question_id, "a") is True
        assert await repo.delete_by_key(question_id, "a") is False
        assert await repo.find_by_key(question_id, "a") is None
