"""FastAPI application."""

from fastapi import FastAPI

from sitehost.interface.api.routes import auth, health, sites, tags
from sitehost.interface.error import register_error_handlers
from sitehost.util.di.container import create_container, setup_di
from sitehost.util.observability import instrument_fastapi


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py does.
    """
    app_instance = FastAPI(
        title="Sitehost API",
        description="Signup and provisioning API for hosted websites",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Settings are loaded from environment automatically
    container = create_container()
    setup_di(app_instance, container)

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(sites.router)
    app_instance.include_router(tags.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
