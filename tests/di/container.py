"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from senatus.util.di import PROVIDERS, Component, get_provider


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build test container with selective unmocking.

    Args:
        unmock: Components to use production implementations for.
                All others use mocks if available.

    Returns:
        Configured test container

    Raises:
        ValueError: If an unknown component is named

    Examples:
        # Unit and E2E tests - in-memory persistence
        container = build_test_container()

        # Integration tests - real PostgreSQL
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    provider_instances = []
    for base in PROVIDERS:
        component_name = getattr(base, "__mock_component__", None)
        use_mock = component_name is not None and component_name not in unmock
        provider_instances.append(get_provider(base, use_mock=use_mock)())

    return make_async_container(*provider_instances, FastapiProvider())


def _validate_unmock(unmock: set[Component]) -> None:
    """Reject component names no provider declares."""
    known = {
        p.__mock_component__ for p in PROVIDERS if p.__mock_component__ is not None
    }
    unknown = unmock - known
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")
