#!/usr/bin/env python3
"""Start the Senatus API under uvicorn, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from senatus.config import Settings
from senatus.util.observability import configure_logfire


def main() -> int:
    settings = Settings()

    # Before the app import so import-time errors are captured
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting Senatus API",
            port=settings.port,
            environment=settings.environment,
            git_sha=settings.git_sha,
        )
        uvicorn.run(
            "senatus.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
        return 0
    except Exception as e:
        logfire.error(
            "Senatus API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
