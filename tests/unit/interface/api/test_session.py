"""Unit tests for session cookie handling."""

from fastapi import Request

from senatus.config import AuthSettings
from senatus.domain.service import JWTService
from senatus.interface.api.session import current_viewer, session_token
from tests.factories import make_user


def _request(cookie_header: str) -> Request:
    return Request(
        {"type": "http", "headers": [(b"cookie", cookie_header.encode())]}
    )


def test_reads_configured_cookie_name():
    settings = AuthSettings(cookie_name="senatus_sid")

    assert session_token(_request("senatus_sid=abc; session=xyz"), settings) == "abc"
    assert session_token(_request("session=xyz"), settings) is None


def test_current_viewer_from_configured_cookie():
    settings = AuthSettings(jwt_secret="test-secret", cookie_name="senatus_sid")
    jwt_service = JWTService(settings)
    token = jwt_service.create_token(make_user("alice", "Alice"))

    viewer = current_viewer(_request(f"senatus_sid={token}"), jwt_service, settings)

    assert viewer == make_user("alice", "Alice")
    assert current_viewer(_request(f"session={token}"), jwt_service, settings) is None
