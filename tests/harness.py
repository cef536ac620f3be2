"""Test harness for unit, integration and E2E tests.

Integration tests assume a PostgreSQL database is reachable at the URL in
DATABASE__URL with migrations applied.
"""

import pytest_asyncio

from senatus.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    The fixture builds a fresh test container (so every test gets empty
    in-memory repositories) and yields a request-scoped container.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        unit_env = create_env_fixture()
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_cast_vote(unit_env):
            vote_service = await unit_env.get(VoteService)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())
        async with container() as request_container:
            yield request_container
        await container.close()

    return _test_environment
