"""Litestar application factory and configuration."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from litestar import Litestar
from litestar.config.cors import CORSConfig
from litestar.logging import LoggingConfig
from litestar.openapi import OpenAPIConfig
from litestar.openapi.spec import Contact, Server

from recipebox import __version__
from recipebox.api.dependencies import dependencies, init_services, shutdown_services
from recipebox.api.errors import exception_handlers
from recipebox.api.routes import (
    AdminController,
    AuthController,
    HealthController,
    ProfileController,
    RecipeController,
)
from recipebox.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> Litestar:
    # sourcery skip: inline-immediately-returned-variable
    """Create and configure Litestar application.

    Args:
        settings: Settings to use instead of the environment (tests).

    Returns:
        Configured Litestar application instance.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: Litestar) -> AsyncGenerator[None, None]:
        """Application lifespan manager.

        Initializes services on startup and cleans up on shutdown.
        """
        logger.info(f"Starting RecipeBox API on port {settings.api_port}")

        app.state.jwt_service = await init_services(settings)

        try:
            yield
        finally:
            logger.info("Shutting down RecipeBox API")
            await shutdown_services()

    # CORS for the browser client
    cors_config = CORSConfig(
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Logging configuration
    logging_config = LoggingConfig(
        root={
            "level": "DEBUG" if settings.debug else "INFO",
            "handlers": ["console"],
        },
        formatters={
            "standard": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            },
        },
        handlers={
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
            },
        },
        loggers={
            "recipebox": {
                "level": "DEBUG" if settings.debug else "INFO",
                "propagate": True,
            },
        },
    )

    # OpenAPI documentation configuration
    openapi_config = OpenAPIConfig(
        title="RecipeBox API",
        version=__version__,
        description="Recipe sharing REST API with token authentication",
        contact=Contact(name="API Support"),
        servers=[
            Server(
                url=f"http://{settings.api_host}:{settings.api_port}",
                description="Local development server",
            ),
        ],
        path="/docs",
    )

    app = Litestar(
        route_handlers=[
            HealthController,
            AuthController,
            ProfileController,
            AdminController,
            RecipeController,
        ],
        dependencies=dependencies,
        exception_handlers=exception_handlers,
        lifespan=[lifespan],
        cors_config=cors_config,
        logging_config=logging_config,
        openapi_config=openapi_config,
        debug=settings.debug,
    )

    return app
