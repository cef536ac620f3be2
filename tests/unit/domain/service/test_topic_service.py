"""Unit tests for TopicService."""

from uuid import uuid4

import pytest

from senatus.domain.error import InvalidReferenceError, NotFoundError, ValidationError
from senatus.domain.repository import TopicRepository
from senatus.domain.service import TopicService
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateTopic:
    @pytest.mark.asyncio
    async def test_create_topic_strips_and_saves(self, unit_env, alice):
        topic_service = await unit_env.get(TopicService)
        topic_repo = await unit_env.get(TopicRepository)

        topic = await topic_service.create_topic("  Astronomy  ", " Stars ", alice)

        assert topic.name == "Astronomy"
        assert topic.description == "Stars"
        assert topic.author == alice
        assert await topic_repo.find_by_id(topic.id) == topic

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", ["", "   "])
    async def test_blank_name_is_rejected(self, unit_env, alice, name):
        topic_service = await unit_env.get(TopicService)

        with pytest.raises(ValidationError, match="Name must be provided"):
            await topic_service.create_topic(name, "", alice)

        assert await topic_service.list_topics_by_author(alice) == []

    @pytest.mark.asyncio
    async def test_overlong_name_is_rejected(self, unit_env, alice):
        topic_service = await unit_env.get(TopicService)

        with pytest.raises(ValidationError) as exc_info:
            await topic_service.create_topic("x" * 201, "", alice)

        assert isinstance(exc_info.value.__cause__, ValueError)


class TestGetTopic:
    @pytest.mark.asyncio
    async def test_malformed_id(self, unit_env):
        topic_service = await unit_env.get(TopicService)

        with pytest.raises(InvalidReferenceError):
            await topic_service.get_topic("nope")

    @pytest.mark.asyncio
    async def test_unknown_id(self, unit_env):
        topic_service = await unit_env.get(TopicService)

        with pytest.raises(NotFoundError):
            await topic_service.get_topic(str(uuid4()))


class TestListTopicsByAuthor:
    @pytest.mark.asyncio
    async def test_only_own_topics_newest_first(self, unit_env, alice, bob):
        topic_service = await unit_env.get(TopicService)
        older = await topic_service.create_topic("First", "", alice)
        await topic_service.create_topic("Bob's", "", bob)
        newer = await topic_service.create_topic("Second", "", alice)

        topics = await topic_service.list_topics_by_author(alice)

        assert [t.id for t in topics] == [newer.id, older.id]
