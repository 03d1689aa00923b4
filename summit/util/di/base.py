"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal, get_args

from dishka import Provider

# Infrastructure that talks to something outside the process. Each has a
# production provider and a test double selected by ``get_provider``.
Component = Literal["persistence", "email", "push", "storage", "queue"]
COMPONENTS: frozenset[str] = frozenset(get_args(Component))


class ProviderBase(Provider):
    """Base for all DI providers.

    Subclasses for a swappable component set ``__mock_component__`` on the
    component base class and ``__is_mock__`` on each implementation.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
