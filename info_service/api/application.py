"""FastAPI application factory for the runtime info service."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.routing import APIRoute

from info_service.config import AppSettings
from info_service.system import SystemSnapshotPort

from .errors import api_register_error_handlers
from .routers import api_create_root_router, api_create_v1_router

logger = logging.getLogger(__name__)


def create_api_application(settings: AppSettings, snapshot_service: SystemSnapshotPort) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for runtime metadata.
        snapshot_service: Runtime snapshot reader used by informational endpoints.

    Returns:
        FastAPI: Framework application with routers and error handlers attached.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    @asynccontextmanager
    async def api_lifespan(application: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Application '%s' version '%s' is ready and running in '%s'",
            settings.application_name,
            settings.application_version,
            settings.environment_name,
        )
        logger.info("API documentation available at %s", application.docs_url)
        if logger.isEnabledFor(logging.DEBUG):
            routes = [route for route in application.routes if isinstance(route, APIRoute)]
            logger.debug("Total routes registered: %d", len(routes))
            for route in routes:
                logger.debug("Route: %s %s", ",".join(sorted(route.methods)), route.path)
        yield
        logger.info("Application '%s' shutting down", settings.application_name)

    application = FastAPI(
        title=settings.application_name,
        version=settings.application_version,
        description=settings.application_description,
        contact={"name": "Development Team", "email": "dev@learn.com"},
        license_info={"name": "Apache License 2.0", "url": "https://www.apache.org/licenses/LICENSE-2.0"},
        lifespan=api_lifespan,
    )

    api_register_error_handlers(application, settings)
    application.include_router(api_create_root_router(settings=settings, snapshot_service=snapshot_service))
    application.include_router(api_create_v1_router(settings=settings, snapshot_service=snapshot_service))

    return application
