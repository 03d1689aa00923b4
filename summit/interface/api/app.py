"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from summit.config import Settings
from summit.interface.api.errors import register_exception_handlers
from summit.interface.api.routes import delegates, health
from summit.util.di.container import create_api_container, setup_di
from summit.util.observability import instrument_fastapi, instrument_httpx


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; the production container by default
    """
    settings = Settings()

    # Outbound calls to Expo and Cloudinary
    instrument_httpx()

    app_instance = FastAPI(
        title="Summit Registration API",
        description="Delegate registration, review and venue check-in for the annual summit",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type", "Content-Disposition"],
        max_age=600,
    )

    setup_di(app_instance, container or create_api_container())
    register_exception_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(delegates.router)

    return app_instance


# App instance for uvicorn; Logfire is configured by start_app.py first
app = create_app()
