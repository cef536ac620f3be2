"""Unit tests for question models."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from senatus.domain.model.question import Question, RankedQuestion
from senatus.domain.value import QuestionId, TopicId
from tests.factories import at, make_user


def _question(text: str = "What is entropy?") -> Question:
    return Question(
        id=QuestionId(uuid4()),
        topic_id=TopicId(uuid4()),
        text=text,
        author=make_user(),
        created_at=at(0),
    )


def test_text_is_stripped():
    assert _question("  Why?  ").text == "Why?"


def test_whitespace_only_text_is_invalid():
    with pytest.raises(ValidationError):
        _question("   ")


def test_ranked_question_keeps_stored_fields():
    question = _question()

    ranked = RankedQuestion.from_question(question, vote_count=4, viewer_can_vote=True)

    assert ranked.id == question.id
    assert ranked.text == question.text
    assert ranked.created_at == question.created_at
    assert ranked.vote_count == 4
    assert ranked.viewer_can_vote is True


def test_ranked_question_rejects_negative_count():
    with pytest.raises(ValidationError):
        RankedQuestion.from_question(_question(), vote_count=-1, viewer_can_vote=False)


def test_ranked_question_from_ranked_question_replaces_aggregates():
    ranked = RankedQuestion.from_question(_question(), vote_count=2, viewer_can_vote=True)

    again = RankedQuestion.from_question(ranked, vote_count=5, viewer_can_vote=False)

    assert again.id == ranked.id
    assert again.vote_count == 5
    assert again.viewer_can_vote is False
