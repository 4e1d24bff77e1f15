"""Observability configuration using Logfire.

Usage:
    import logfire

    logfire.info("Comment tree built", roots=len(roots), total=total)

    with logfire.span("comment_tree_builder.build", records=len(records)):
        ...
"""

import logfire
from fastapi import FastAPI

from agora.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Cloud sending is decided by, in order: the explicit
    OBSERVABILITY__SEND_TO_LOGFIRE setting, the presence of
    OBSERVABILITY__LOGFIRE_TOKEN, otherwise console only.

    Args:
        settings: Application settings
    """
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    elif settings.observability.logfire_token:
        send_to_logfire = True
    else:
        send_to_logfire = False

    config_kwargs = {
        "service_name": "agora-discussions",
        "service_version": "0.1.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
        has_token=bool(settings.observability.logfire_token),
    )


# Path parameters copied onto request spans so traces can be filtered by discussion
DISCUSSION_PARAMS = ("group_id", "topic_id", "comment_id")


def map_request_attributes(request, attributes: dict) -> dict:
    """Add the discussion being served to the request span."""
    result = {**attributes}
    path_params = getattr(request, "path_params", None) or {}
    for name in DISCUSSION_PARAMS:
        if name in path_params:
            result[name] = path_params[name]
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Instrument FastAPI application with Logfire.

    Health checks are polled constantly and are left untraced.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=map_request_attributes,
        excluded_urls="/health",
    )
    logfire.info("FastAPI instrumented")


def instrument_httpx() -> None:
    """Instrument httpx so relayer and IPFS calls show up as spans."""
    logfire.instrument_httpx()
    logfire.info("httpx instrumented")
