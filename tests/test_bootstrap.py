"""Tests for application bootstrap wiring and lifespan logging."""

import logging

import pytest
from fastapi import FastAPI
from fastapi.routing import APIRoute
from fastapi.testclient import TestClient

from info_service.api.application import create_api_application
from info_service.bootstrap import bootstrap_create_application, bootstrap_create_snapshot_service
from info_service.config import AppSettings


def test_bootstrap_create_application_registers_both_route_groups() -> None:
    """Assemble application with primary and versioned routes.

    Returns:
        None: Assertions validate registered route paths.

    Raises:
        AssertionError: Raised when a route group is missing.
    """

    application = bootstrap_create_application(AppSettings(environment_name="test", log_level="WARNING"))

    assert isinstance(application, FastAPI)
    paths = {route.path for route in application.routes if isinstance(route, APIRoute)}
    assert {"/", "/ping", "/healthz", "/info"} <= paths
    assert {"/api/v1/", "/api/v1/ping", "/api/v1/health", "/api/v1/greet"} <= paths
    assert application.title == "learn-python"


def test_bootstrap_create_snapshot_service_binds_process_start_time() -> None:
    service = bootstrap_create_snapshot_service(AppSettings(environment_name="test"))

    assert service.process_started_at > 0
    assert service.system_get_uptime_seconds() >= 0


def test_application_lifespan_logs_ready_line_and_routes(caplog: pytest.LogCaptureFixture) -> None:
    settings = AppSettings(application_name="learn-python", environment_name="test")
    application = create_api_application(settings, bootstrap_create_snapshot_service(settings))
    caplog.set_level(logging.DEBUG, logger="info_service.api.application")

    with TestClient(application) as client:
        assert client.get("/ping").text == "pong"

    messages = [record.getMessage() for record in caplog.records]
    assert any("is ready and running" in message for message in messages)
    assert any(message.startswith("Route: GET /healthz") for message in messages)


def test_create_api_application_rejects_missing_snapshot_service() -> None:
    with pytest.raises(ValueError):
        create_api_application(AppSettings(environment_name="test"), None)
