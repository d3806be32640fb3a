#!/usr/bin/env python3
"""Start the comment service, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from tracker.config import Settings
from tracker.util.logging import setup_logging
from tracker.util.observability import configure_logfire


def main() -> int:
    """Configure logging and observability, then serve the API."""
    settings = Settings()

    # Logfire first so import-time failures in the app are captured
    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting comment service",
            host=settings.host,
            port=settings.port,
            environment=settings.environment,
            git_sha=settings.git_sha,
        )
        uvicorn.run(
            "tracker.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
        return 0

    except Exception as e:
        logfire.error(
            "Comment service failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
