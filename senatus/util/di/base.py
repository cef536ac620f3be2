"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Names of infrastructure components that tests may swap for in-memory fakes
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Common base for every Senatus provider.

    Attributes:
        __mock_component__: Component name for swappable providers, None otherwise
        __is_mock__: True on the in-memory/test implementation of a component
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
