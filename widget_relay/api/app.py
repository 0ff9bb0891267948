"""FastAPI application factory and configuration.

Main application entry point with lifespan management, middleware,
static files and router registration.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from widget_relay.api.pages import PUBLIC_DIR
from widget_relay.api.pages import router as pages_router
from widget_relay.api.relay import router as relay_router
from widget_relay.relay.service import get_relay_service

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application startup and shutdown lifecycle.

    Creates the relay service on startup so a missing API key fails
    the server immediately instead of on the first chat request.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    # Startup
    service = get_relay_service()
    logger.info(f"Starting Widget Relay API (model: {service.model_name})...")
    yield
    # Shutdown
    logger.info("Shutting down Widget Relay API...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Widget Relay API",
        description=(
            "Backend for an embeddable chat widget. Relays a message and an "
            "optional file to the OpenAI Responses API and returns the reply text."
        ),
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(relay_router)
    application.include_router(pages_router)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "widget-relay"}

    application.mount("/static", StaticFiles(directory=PUBLIC_DIR), name="static")

    return application


app = create_app()
