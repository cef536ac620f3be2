"""End-to-end tests for topics, questions and voting over HTTP."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from senatus.interface.api.app import create_app
from senatus.util.di.container import setup_di
from tests.di import build_test_container
from tests.factories import make_user, session_cookie

ALICE = make_user("alice", "Alice")
BOB = make_user("bob", "Bob")


@pytest.fixture
def client():
    """Create test client backed by in-memory persistence."""
    app_instance = create_app()
    test_container = build_test_container()
    setup_di(app_instance, test_container)
    return TestClient(app_instance)


def _create_topic(client, name="Astronomy", user=ALICE) -> str:
    response = client.post(
        "/topics", json={"name": name}, cookies=session_cookie(user)
    )
    assert response.status_code == 201
    return response.json()["topic_id"]


def _ask(client, topic_id, text, user=ALICE) -> str:
    response = client.post(
        f"/topics/{topic_id}/questions", json={"text": text}, cookies=session_cookie(user)
    )
    assert response.status_code == 201
    return response.json()["question_id"]


def _vote_url(topic_id, question_id) -> str:
    return f"/topics/{topic_id}/questions/{question_id}/vote"


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestTopics:
    def test_create_topic_requires_auth(self, client):
        response = client.post("/topics", json={"name": "Astronomy"})

        assert response.status_code == 401

    def test_invalid_session_is_anonymous(self, client):
        response = client.post(
            "/topics", json={"name": "Astronomy"}, cookies={"session": "invalid-token"}
        )

        assert response.status_code == 401

    def test_blank_name_is_bad_request(self, client):
        response = client.post(
            "/topics", json={"name": "   "}, cookies=session_cookie(ALICE)
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Name must be provided"

    def test_my_topics(self, client):
        _create_topic(client, "Mine", ALICE)
        _create_topic(client, "Theirs", BOB)

        response = client.get("/topics", cookies=session_cookie(ALICE))

        assert response.status_code == 200
        assert [t["name"] for t in response.json()["topics"]] == ["Mine"]

    def test_view_unknown_topic(self, client):
        assert client.get(f"/topics/{uuid4()}").status_code == 404

    def test_view_malformed_topic(self, client):
        assert client.get("/topics/not-an-id").status_code == 400


class TestQuestions:
    def test_blank_question_is_rejected(self, client):
        topic_id = _create_topic(client)

        response = client.post(
            f"/topics/{topic_id}/questions",
            json={"text": "  "},
            cookies=session_cookie(ALICE),
        )

        assert response.status_code == 400
        topic = client.get(f"/topics/{topic_id}").json()
        assert topic["questions"] == []

    def test_question_on_unknown_topic(self, client):
        response = client.post(
            f"/topics/{uuid4()}/questions",
            json={"text": "Why?"},
            cookies=session_cookie(ALICE),
        )

        assert response.status_code == 404


class TestVoting:
    def test_vote_toggle_and_ranking(self, client):
        topic_id = _create_topic(client)
        q1 = _ask(client, topic_id, "Q1")
        q2 = _ask(client, topic_id, "Q2")

        # Bob votes Q1 twice: still one vote
        for _ in range(2):
            response = client.post(_vote_url(topic_id, q1), cookies=session_cookie(BOB))
            assert response.status_code == 200
            assert response.json() == {"question_id": q1, "voted": True, "vote_count": 1}

        view = client.get(f"/topics/{topic_id}", cookies=session_cookie(BOB)).json()
        assert [q["question_id"] for q in view["questions"]] == [q1, q2]
        assert [q["viewer_can_vote"] for q in view["questions"]] == [False, True]
        assert [q["belongs_to_viewer"] for q in view["questions"]] == [False, False]

        # Retract twice: second call is a no-op
        first = client.delete(_vote_url(topic_id, q1), cookies=session_cookie(BOB))
        second = client.delete(_vote_url(topic_id, q1), cookies=session_cookie(BOB))
        assert first.json()["removed"] is True
        assert second.status_code == 200
        assert second.json()["removed"] is False
        assert second.json()["vote_count"] == 0

        # Tied at zero: newest first
        view = client.get(f"/topics/{topic_id}").json()
        assert [q["question_id"] for q in view["questions"]] == [q2, q1]
        assert view["logged_in"] is False

    def test_anonymous_vote_is_unauthorized(self, client):
        topic_id = _create_topic(client)
        question_id = _ask(client, topic_id, "Q1")

        response = client.post(_vote_url(topic_id, question_id))

        assert response.status_code == 401
        view = client.get(f"/topics/{topic_id}").json()
        assert view["questions"][0]["vote_count"] == 0

    def test_malformed_question_id(self, client):
        topic_id = _create_topic(client)

        response = client.post(
            _vote_url(topic_id, "not-a-uuid"), cookies=session_cookie(BOB)
        )

        assert response.status_code == 400

    def test_vote_on_unknown_question(self, client):
        topic_id = _create_topic(client)

        response = client.post(
            _vote_url(topic_id, uuid4()), cookies=session_cookie(BOB)
        )

        assert response.status_code == 404


class TestMe:
    def test_anonymous(self, client):
        response = client.get("/me")

        assert response.status_code == 200
        assert response.json() == {"viewer": None}

    def test_authenticated(self, client):
        response = client.get("/me", cookies=session_cookie(ALICE))

        assert response.json() == {
            "viewer": {"external_id": "alice", "display_name": "Alice"}
        }
