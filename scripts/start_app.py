#!/usr/bin/env python3
"""Serve the registration API with uvicorn.

Logfire is configured before the app module is imported so that import-time
failures (bad settings, unreachable services) are reported.
"""

import sys

import logfire
import uvicorn

from summit.config import Settings
from summit.util.logging import setup_logging
from summit.util.observability import configure_logfire


def main() -> int:
    settings = Settings()

    setup_logging(settings, process="api")
    configure_logfire(settings, service_name="summit-api")

    development = settings.environment == "development"
    logfire.info(
        "Starting registration API",
        port=settings.port,
        environment=settings.environment,
        git_sha=settings.git_sha,
    )
    try:
        uvicorn.run(
            "summit.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            reload=development,
            # Behind the production load balancer, trust X-Forwarded-* headers
            proxy_headers=not development,
            forwarded_allow_ips="*",
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Registration API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
