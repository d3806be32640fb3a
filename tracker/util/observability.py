"""Logfire setup and library instrumentation.

Domain code talks to logfire directly:

    with logfire.span("vote_service.cast_vote", comment_id=str(comment_id)):
        logfire.info("Vote state changed", previous="up", current="none")

This module only decides where that telemetry goes and hooks the web and
database layers in.
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from tracker.config import ObservabilitySettings, Settings

SERVICE_NAME = "tracker-comments"


def should_send(observability: ObservabilitySettings) -> bool:
    """Explicit switch wins; otherwise send whenever a token is configured."""
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure the global Logfire instance once per process.

    Args:
        settings: Application settings
    """
    send = should_send(settings.observability)
    options: dict[str, Any] = {
        "service_name": SERVICE_NAME,
        "service_version": settings.git_sha,
        "environment": settings.environment,
        "send_to_logfire": send,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }
    if settings.observability.logfire_token:
        options["token"] = settings.observability.logfire_token

    logfire.configure(**options)
    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send,
    )


def _request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    # WebSocket scopes have no method
    extra = {"path": request.url.path}
    if hasattr(request, "method"):
        extra["method"] = request.method
    return {**attributes, **extra}


def instrument_fastapi(app: FastAPI) -> None:
    """Open a span per HTTP request handled by ``app``.

    Headers are not captured; the auth_token cookie travels in them.
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Open a span per SQL statement, tagged with the calling span."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
