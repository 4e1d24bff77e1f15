"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal, get_args

from dishka import Provider

# External services that can be swapped for in-memory doubles
Component = Literal["relayer", "ipfs"]
COMPONENTS: frozenset[Component] = frozenset(get_args(Component))


class ProviderBase(Provider):
    """Base for all DI providers.

    A provider class with subclasses is a mockable component: its subclasses
    are the production and mock variants, told apart by ``__is_mock__``.

    Attributes:
        __mock_component__: Component name, None for concrete providers
        __is_mock__: Whether this is a mock implementation
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def variant(cls, use_mock: bool) -> type["ProviderBase"]:
        """Pick the production or mock variant of this provider.

        Concrete providers (no subclasses) return themselves.

        Raises:
            ValueError: If the requested variant is not defined
        """
        subclasses = cls.__subclasses__()
        if not subclasses:
            return cls

        for subclass in subclasses:
            if subclass.__is_mock__ == use_mock:
                return subclass

        kind = "mock" if use_mock else "production"
        raise ValueError(f"No {kind} implementation for {cls.__mock_component__}")
