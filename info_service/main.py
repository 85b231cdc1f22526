"""Main module entrypoint for local runtime execution.

This module validates startup configuration and launches the FastAPI service.
"""

import argparse
import json

import uvicorn

from info_service.bootstrap import bootstrap_create_application, bootstrap_create_snapshot_service
from info_service.config import config_load_settings
from info_service.domain import domain_to_payload


def main() -> None:
    """Run selected runtime command with validated startup configuration.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
    """

    argument_parser = argparse.ArgumentParser(description="Runtime info API entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "snapshot"),
        help="Runtime command: `api` starts server, `snapshot` prints current system info as JSON",
        type=str,
    )
    parsed_arguments = argument_parser.parse_args()

    settings = config_load_settings()

    if parsed_arguments.command == "snapshot":
        snapshot_service = bootstrap_create_snapshot_service(settings)
        print(json.dumps(domain_to_payload(snapshot_service.system_get_system_info()), indent=2))
        return

    application = bootstrap_create_application(settings)
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
