"""Access gate: identity-based permission predicates."""

from typing import Protocol

from senatus.domain.error import NotAuthenticatedError
from senatus.domain.value import User

from .base import Service


class Authored(Protocol):
    """Anything carrying an author snapshot (topics, questions)."""

    @property
    def author(self) -> User: ...


class AccessGate(Service):
    """Maps an optional viewer identity to permissions.

    Pure: no persistence, no side effects. Identity equality is decided by
    external_id alone; display names may change between sessions.
    """

    def can_vote(self, viewer: User | None) -> bool:
        """Whether the viewer may cast votes at all."""
        return viewer is not None

    def owns(self, entity: Authored, viewer: User | None) -> bool:
        """Whether the viewer authored the entity."""
        if viewer is None:
            return False
        return entity.author.external_id == viewer.external_id

    def require_viewer(self, viewer: User | None, action: str) -> User:
        """Return the viewer or fail for anonymous callers.

        Args:
            viewer: Current identity, if any
            action: Human-readable action name for the error message

        Raises:
            NotAuthenticatedError: If there is no viewer
        """
        if viewer is None:
            raise NotAuthenticatedError(action)
        return viewer
