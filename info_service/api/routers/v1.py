"""Versioned `/api/v1` router returning flat, non-enveloped payloads.

Validation failures on this router use a `{"error", "details"}` body instead
of the response envelope.
"""

import json
import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from info_service.config import AppSettings
from info_service.domain import (
    EndpointInfo,
    GreetingData,
    GreetingRequest,
    WelcomeData,
    domain_to_payload,
    domain_validate_greeting,
)
from info_service.system import SystemSnapshotPort, system_utc_timestamp

logger = logging.getLogger(__name__)

V1_PREFIX = "/api/v1"

V1_ENDPOINTS = (
    EndpointInfo(path=f"{V1_PREFIX}/", method="GET", description="Welcome message with available endpoints"),
    EndpointInfo(path=f"{V1_PREFIX}/ping", method="GET", description="Simple ping-pong response"),
    EndpointInfo(path=f"{V1_PREFIX}/health", method="GET", description="Health check endpoint"),
    EndpointInfo(path=f"{V1_PREFIX}/greet", method="POST", description="Greet a user by name"),
)


def api_create_v1_router(settings: AppSettings, snapshot_service: SystemSnapshotPort) -> APIRouter:
    """Create the versioned router with flat welcome, ping, health and greet endpoints.

    Args:
        settings: Runtime settings used for application identity.
        snapshot_service: Runtime snapshot reader.

    Returns:
        APIRouter: Router mounted under `/api/v1`.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")
    if snapshot_service is None:
        raise ValueError("snapshot_service must not be None")

    router = APIRouter(prefix=V1_PREFIX, tags=["v1"])

    @router.get("/")
    def api_v1_welcome() -> JSONResponse:
        logger.info("V1 welcome endpoint accessed")
        welcome_data = WelcomeData(
            message="Welcome to Learn Python API v1!",
            application=settings.application_name,
            version=settings.application_version,
            environment=settings.environment_name,
            endpoints=V1_ENDPOINTS,
        )
        return JSONResponse(content=domain_to_payload(welcome_data), status_code=status.HTTP_200_OK)

    @router.get("/ping")
    def api_v1_ping() -> JSONResponse:
        logger.info("V1 ping endpoint accessed")
        payload = {"message": "pong", "timestamp": system_utc_timestamp()}
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    @router.get("/health")
    def api_v1_health() -> JSONResponse:
        logger.info("V1 health endpoint accessed")
        health_data = snapshot_service.system_get_health_data()
        payload = {
            "status": health_data.status,
            "uptime": health_data.uptime,
            "timestamp": health_data.timestamp,
        }
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    @router.post(
        "/greet",
        status_code=status.HTTP_201_CREATED,
        openapi_extra={
            "requestBody": {
                "required": True,
                "content": {"application/json": {"schema": GreetingRequest.model_json_schema(by_alias=True)}},
            }
        },
    )
    async def api_v1_greet(request: Request) -> JSONResponse:
        """Greet the caller by name.

        The body is decoded here rather than by the framework so malformed
        JSON is reported in this router's flat error shape.

        Args:
            request: Incoming request carrying a JSON object with a `name` field.

        Returns:
            JSONResponse: HTTP 201 greeting, or HTTP 400 with per-field details.
        """

        logger.info("V1 greet endpoint accessed")
        raw_body = await request.body()
        try:
            payload = json.loads(raw_body) if raw_body.strip() else None
        except (json.JSONDecodeError, UnicodeDecodeError):
            field_errors = {"body": "Malformed JSON body"}
        else:
            field_errors = domain_validate_greeting(payload)

        if field_errors:
            logger.warning("Greet validation failed: %s", field_errors)
            error_payload = {"error": "Validation failed", "details": field_errors}
            return JSONResponse(content=error_payload, status_code=status.HTTP_400_BAD_REQUEST)

        greeting_request = GreetingRequest.model_validate(payload)
        greeting = GreetingData(message=f"Hello, {greeting_request.name.strip()}!", timestamp=system_utc_timestamp())
        return JSONResponse(content=domain_to_payload(greeting), status_code=status.HTTP_201_CREATED)

    return router
