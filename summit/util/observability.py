"""Logfire setup shared by the API, the worker and the migration script.

Services, adapters and use cases emit spans and structured events directly::

    with logfire.span("lifecycle_service.approve", delegate_id=str(delegate_id)):
        ...
        logfire.info("Delegate approved", delegate_id=str(delegate_id))
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from summit.config import Settings

# Load balancer probes would otherwise dominate the trace volume
UNTRACED_URLS = ["/health"]


def configure_logfire(settings: Settings, service_name: str) -> None:
    """Configure Logfire for one process.

    Telemetry is sent to Logfire when a token is present, unless
    ``OBSERVABILITY__SEND_TO_LOGFIRE`` says otherwise; the console always
    receives it.

    Args:
        settings: Application settings
        service_name: ``summit-api``, ``summit-worker`` or ``summit-migrations``
    """
    observability = settings.observability
    send_to_logfire = (
        observability.send_to_logfire
        if observability.send_to_logfire is not None
        else bool(observability.logfire_token)
    )

    options: dict[str, Any] = {
        "service_name": service_name,
        "service_version": settings.git_sha,
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }
    if observability.logfire_token:
        options["token"] = observability.logfire_token

    logfire.configure(**options)
    logfire.info(
        "Logfire configured",
        service=service_name,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    """Keep the method, path and delegate ID on request spans."""
    result = {**attributes}
    if hasattr(request, "method"):
        result["method"] = request.method
    if hasattr(request, "url"):
        result["path"] = request.url.path
    delegate_id = getattr(request, "path_params", {}).get("delegate_id")
    if delegate_id:
        result["delegate_id"] = delegate_id
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every API request except health probes."""
    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_request_attributes,
        excluded_urls=UNTRACED_URLS,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL issued through the engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)


def instrument_httpx() -> None:
    """Trace outbound calls to Expo and Cloudinary."""
    logfire.instrument_httpx()


def instrument_celery() -> None:
    """Trace publishing and execution of deferred notification jobs."""
    logfire.instrument_celery()
