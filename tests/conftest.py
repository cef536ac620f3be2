"""Test configuration and fixtures."""

import logfire
import pytest

from senatus.domain.value import User
from tests.factories import make_user

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def alice() -> User:
    return make_user("alice", "Alice")


@pytest.fixture
def bob() -> User:
    return make_user("bob", "Bob")
