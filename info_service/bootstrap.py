"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from info_service.api import create_api_application
from info_service.config import AppSettings, config_configure_logging, config_load_settings
from info_service.system import PsutilSystemSnapshotService, system_resolve_process_start_time


def bootstrap_create_snapshot_service(settings: AppSettings) -> PsutilSystemSnapshotService:
    """Build the snapshot reader bound to this process's start time.

    Args:
        settings: Validated runtime settings.

    Returns:
        PsutilSystemSnapshotService: Snapshot reader instance.
    """

    return PsutilSystemSnapshotService(
        settings=settings,
        process_started_at=system_resolve_process_start_time(),
    )


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional pre-loaded settings; loaded from the environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    config_configure_logging(resolved_settings)
    snapshot_service = bootstrap_create_snapshot_service(resolved_settings)
    return create_api_application(settings=resolved_settings, snapshot_service=snapshot_service)
