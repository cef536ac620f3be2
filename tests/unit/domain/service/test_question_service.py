"""Unit tests for QuestionService."""

from uuid import uuid4

import pytest

from senatus.domain.error import InvalidReferenceError, NotFoundError, ValidationError
from senatus.domain.service import QuestionService, TopicService
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateQuestion:
    @pytest.mark.asyncio
    async def test_question_is_listed_under_topic(self, unit_env, alice, bob):
        topic_service = await unit_env.get(TopicService)
        question_service = await unit_env.get(QuestionService)
        topic = await topic_service.create_topic("Biology", "", alice)

        question = await question_service.create_question(
            str(topic.id), "  What is DNA?  ", bob
        )

        assert question.text == "What is DNA?"
        assert question.topic_id == topic.id
        assert await question_service.list_questions_for_topic(topic.id) == [question]

    @pytest.mark.asyncio
    async def test_blank_text_is_rejected_and_nothing_stored(self, unit_env, alice):
        topic_service = await unit_env.get(TopicService)
        question_service = await unit_env.get(QuestionService)
        topic = await topic_service.create_topic("Biology", "", alice)

        with pytest.raises(ValidationError, match="Question must be provided"):
            await question_service.create_question(topic.id, "   ", alice)

        assert await question_service.list_questions_for_topic(topic.id) == []

    @pytest.mark.asyncio
    async def test_overlong_text_keeps_cause(self, unit_env, alice):
        topic_service = await unit_env.get(TopicService)
        question_service = await unit_env.get(QuestionService)
        topic = await topic_service.create_topic("Biology", "", alice)

        with pytest.raises(ValidationError) as exc_info:
            await question_service.create_question(topic.id, "x" * 1001, alice)

        assert isinstance(exc_info.value.__cause__, ValueError)
        assert await question_service.list_questions_for_topic(topic.id) == []

    @pytest.mark.asyncio
    async def test_unknown_topic(self, unit_env, alice):
        question_service = await unit_env.get(QuestionService)

        with pytest.raises(NotFoundError):
            await question_service.create_question(str(uuid4()), "Why?", alice)

    @pytest.mark.asyncio
    async def test_malformed_topic_id(self, unit_env, alice):
        question_service = await unit_env.get(QuestionService)

        with pytest.raises(InvalidReferenceError):
            await question_service.create_question("topic-1", "Why?", alice)


class TestGetQuestion:
    @pytest.mark.asyncio
    async def test_unknown_question(self, unit_env):
        question_service = await unit_env.get(QuestionService)

        with pytest.raises(NotFoundError):
            await question_service.get_question(uuid4())
