"""Test container builder with selective unmocking."""

from dishka import AsyncContainer

from agora.config import Settings
from agora.util.di import COMPONENTS, PROVIDERS, Component, get_provider
from agora.util.di.container import create_container


def build_test_container(
    unmock: set[Component] | None = None,
    settings: Settings | None = None,
) -> AsyncContainer:
    """Build test container with selective unmocking.

    Args:
        unmock: Components to use production implementations for.
                All others use their in-memory mocks.
        settings: Settings to inject; a test environment by default

    Returns:
        Configured test container

    Raises:
        ValueError: If unknown components are requested

    Examples:
        # Unit tests - all mocks
        container = build_test_container()

        # Real relayer, mocked content store
        container = build_test_container(unmock={"relayer"})
    """
    unmock = unmock or set()
    unknown = unmock - COMPONENTS
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    providers = []
    for base in PROVIDERS:
        component = base.__mock_component__
        use_mock = component is not None and component not in unmock
        providers.append(get_provider(base, use_mock=use_mock)())

    return create_container(
        settings=settings or Settings(environment="test"),
        providers=providers,
    )
