"""Primary router exposing enveloped informational endpoints."""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse, PlainTextResponse

from info_service.config import AppSettings
from info_service.domain import EndpointInfo, WelcomeData
from info_service.system import SystemSnapshotPort

from ..envelope import envelope_response, envelope_success

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Welcome to Learn Python API!"

ROOT_ENDPOINTS = (
    EndpointInfo(path="/", method="GET", description="Welcome message with available endpoints"),
    EndpointInfo(path="/ping", method="GET", description="Simple ping-pong response"),
    EndpointInfo(path="/healthz", method="GET", description="Health check endpoint"),
    EndpointInfo(path="/info", method="GET", description="Application information"),
)


def api_create_root_router(settings: AppSettings, snapshot_service: SystemSnapshotPort) -> APIRouter:
    """Create the primary router with welcome, ping, health and info endpoints.

    Args:
        settings: Runtime settings used for application identity.
        snapshot_service: Runtime snapshot reader.

    Returns:
        APIRouter: Router exposing `/`, `/ping`, `/healthz` and `/info`.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")
    if snapshot_service is None:
        raise ValueError("snapshot_service must not be None")

    router = APIRouter(tags=["info"])

    @router.get("/", summary="Get welcome message")
    def api_welcome() -> JSONResponse:
        """Return welcome message with the available endpoints."""

        logger.info("Welcome endpoint accessed")
        welcome_data = WelcomeData(
            message=WELCOME_MESSAGE,
            application=settings.application_name,
            version=settings.application_version,
            environment=settings.environment_name,
            endpoints=ROOT_ENDPOINTS,
        )
        return envelope_response(envelope_success(welcome_data), status.HTTP_200_OK)

    @router.get("/ping", summary="Ping endpoint", response_class=PlainTextResponse)
    def api_ping() -> PlainTextResponse:
        """Return literal `pong` as plain text for connectivity checks."""

        logger.info("Ping endpoint accessed")
        return PlainTextResponse(content="pong", status_code=status.HTTP_200_OK)

    @router.get("/healthz", summary="Health check")
    def api_healthz() -> JSONResponse:
        """Return application health status with process memory metrics."""

        logger.info("Health endpoint accessed")
        health_data = snapshot_service.system_get_health_data()
        return envelope_response(envelope_success(health_data), status.HTTP_200_OK)

    @router.get("/info", summary="Application information")
    def api_info() -> JSONResponse:
        """Return detailed application and system information."""

        logger.info("Info endpoint accessed")
        system_info = snapshot_service.system_get_system_info()
        return envelope_response(envelope_success(system_info), status.HTTP_200_OK)

    return router
