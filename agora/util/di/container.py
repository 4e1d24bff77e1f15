"""Dependency injection container."""

from collections.abc import Iterable

from dishka import AsyncContainer, Provider, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka

from agora.config import Settings
from agora.util.di import PROVIDERS, get_provider


def create_container(
    settings: Settings | None = None,
    providers: Iterable[Provider] | None = None,
) -> AsyncContainer:
    """Build a DI container wired for FastAPI.

    Args:
        settings: Settings shared with the caller; loaded from the
                  environment when omitted
        providers: Provider instances to use instead of the production set

    Returns:
        Configured DI container
    """
    if providers is None:
        providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(
        *providers,
        FastapiProvider(),
        context={Settings: settings or Settings()},
    )


def setup_di(app, container: AsyncContainer) -> None:
    """Attach a container to a FastAPI application.

    Calling it again replaces the container, which is how tests swap in
    mocks after ``create_app``.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
