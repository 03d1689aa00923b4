"""Stdlib logging setup for the API and worker processes.

Application events are emitted through logfire; this only shapes the output of
uvicorn, Celery and the client libraries the adapters use.
"""

import logging
import sys
from typing import Literal

from summit.config import Settings

Process = Literal["api", "worker"]

# Libraries that log every request or connection at INFO
NOISY_LOGGERS = {
    "api": ("httpx", "httpcore", "aiosmtplib", "PIL", "passlib", "multipart"),
    "worker": ("httpx", "httpcore", "kombu", "celery.redirected", "amqp"),
}


def setup_logging(settings: Settings, process: Process = "api") -> None:
    """Route stdlib logging to stdout at a level derived from ``settings.debug``.

    Args:
        settings: Application settings
        process: Which process is starting; selects the loggers to quiet
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format=f"%(asctime)s [{process}] %(name)s %(levelname)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in NOISY_LOGGERS[process]:
        logging.getLogger(name).setLevel(logging.WARNING)
    if not settings.debug:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging ready for %s (%s, %s)",
        process,
        settings.environment,
        logging.getLevelName(level),
    )
