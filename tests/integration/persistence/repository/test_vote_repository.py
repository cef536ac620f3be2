"""Integration tests for PostgresVoteRepository.

Require a migrated PostgreSQL database at DATABASE__URL.
"""

import asyncio
from uuid import uuid4

import pytest

from senatus.domain.model import Question, Topic, Vote
from senatus.domain.repository import (
    QuestionRepository,
    TopicRepository,
    VoteRepository,
)
from senatus.domain.value import QuestionId, TopicId
from tests.di import build_test_container
from tests.factories import make_user
from tests.harness import create_env_fixture

integration_env = create_env_fixture(unmock={"persistence"})


async def _question(integration_env) -> Question:
    topic_repo = await integration_env.get(TopicRepository)
    question_repo = await integration_env.get(QuestionRepository)
    author = make_user(f"author-{uuid4()}")
    topic = await topic_repo.save(
        Topic(id=TopicId(uuid4()), name="Integration", author=author)
    )
    return await question_repo.save(
        Question(id=QuestionId(uuid4()), topic_id=topic.id, text="Q?", author=author)
    )


class TestPostgresVoteRepository:
    @pytest.mark.asyncio
    async def test_upsert_on_conflict_keeps_one_row(self, integration_env):
        vote_repo = await integration_env.get(VoteRepository)
        question = await _question(integration_env)
        vote = Vote(question_id=question.id, voter_id="alice")

        assert await vote_repo.upsert(vote) is True
        assert await vote_repo.upsert(vote) is False
        assert await vote_repo.count_by_question(question.id) == 1

    @pytest.mark.asyncio
    async def test_repeated_upserts_report_single_creation(self, integration_env):
        """Repeated upserts for one key report a single creation."""
        vote_repo = await integration_env.get(VoteRepository)
        question = await _question(integration_env)
        votes = [Vote(question_id=question.id, voter_id="bob") for _ in range(3)]

        results = [await vote_repo.upsert(v) for v in votes]

        assert results.count(True) == 1
        assert await vote_repo.count_by_question(question.id) == 1

    @pytest.mark.asyncio
    async def test_batch_counts_and_voted_set(self, integration_env):
        vote_repo = await integration_env.get(VoteRepository)
        q1 = await _question(integration_env)
        q2 = await _question(integration_env)
        await vote_repo.upsert(Vote(question_id=q1.id, voter_id="alice"))
        await vote_repo.upsert(Vote(question_id=q1.id, voter_id="bob"))

        counts = await vote_repo.count_by_questions([q1.id, q2.id])
        voted = await vote_repo.find_voted_questions("alice", [q1.id, q2.id])

        assert counts == {q1.id: 2, q2.id: 0}
        assert voted == {q1.id}

    @pytest.mark.asyncio
    async def test_delete_by_key(self, integration_env):
        vote_repo = await integration_env.get(VoteRepository)
        question = await _question(integration_env)
        await vote_repo.upsert(Vote(question_id=question.id, voter_id="alice"))

        assert await vote_repo.delete_by_key(question.id, "alice") is True
        assert await vote_repo.delete_by_key(question.id, "alice") is False
        assert await vote_repo.find_by_key(question.id, "alice") is None


class TestConcurrentSessions:
    """Same vote key written from separate request scopes (separate sessions)."""

    @pytest.mark.asyncio
    async def test_two_sessions_upsert_same_key(self):
        container = build_test_container(unmock={"persistence"})
        try:
            async with container() as setup_scope:
                question = await _question(setup_scope)

            async def upsert_in_own_request() -> bool:
                async with container() as request_scope:
                    vote_repo = await request_scope.get(VoteRepository)
                    return await vote_repo.upsert(
                        Vote(question_id=question.id, voter_id="carol")
                    )

            results = await asyncio.gather(
                upsert_in_own_request(), upsert_in_own_request()
            )

            async with container() as check_scope:
                vote_repo = await check_scope.get(VoteRepository)
                count = await vote_repo.count_by_question(question.id)
        finally:
            await container.close()

        assert sorted(results) == [False, True]
        assert count == 1
