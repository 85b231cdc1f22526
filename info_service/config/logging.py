"""Process-wide logging configuration."""

import logging.config

from .settings import AppSettings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def config_configure_logging(settings: AppSettings) -> None:
    """Configure root and server loggers with a single stdout handler.

    Args:
        settings: Validated settings providing the log level.

    Returns:
        None: Logging configuration is applied as a side effect.
    """

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {"format": LOG_FORMAT},
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "root": {"level": settings.log_level, "handlers": ["console"]},
            "loggers": {
                # uvicorn attaches its own handlers unless told otherwise
                "uvicorn": {"level": settings.log_level, "handlers": ["console"], "propagate": False},
                "uvicorn.error": {"level": settings.log_level, "handlers": ["console"], "propagate": False},
                "uvicorn.access": {"level": settings.log_level, "handlers": ["console"], "propagate": False},
            },
        }
    )
