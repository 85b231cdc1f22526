"""Exception-to-envelope mapping for the FastAPI application."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from info_service.config import AppSettings

from .envelope import envelope_error, envelope_response

logger = logging.getLogger(__name__)

VALIDATION_FAILED_MESSAGE = "Validation failed"
INTERNAL_ERROR_MESSAGE = "Internal Server Error"
REQUEST_LOCATION_SOURCES = ("body", "query", "path", "header", "cookie")


def api_collect_field_errors(error: RequestValidationError) -> dict[str, str]:
    """Collapse framework validation errors into a field-to-message mapping.

    Args:
        error: Request validation error raised by FastAPI.

    Returns:
        dict[str, str]: Failing field name to message; later errors for the
            same field overwrite earlier ones.
    """

    field_errors: dict[str, str] = {}
    for detail in error.errors():
        location = [part for part in detail.get("loc", ()) if part not in REQUEST_LOCATION_SOURCES]
        if detail.get("type") == "json_invalid" or all(isinstance(part, int) for part in location):
            # json_invalid locations carry a byte offset, not a field
            field_name = "body"
        else:
            field_name = ".".join(str(part) for part in location)
        field_errors[field_name] = str(detail.get("msg", "invalid value"))
    return field_errors


def api_register_error_handlers(application: FastAPI, settings: AppSettings) -> None:
    """Attach validation and catch-all exception handlers to the application.

    Args:
        application: Application receiving the handlers.
        settings: Settings deciding whether exception detail is disclosed.

    Returns:
        None: Handlers are registered as a side effect.

    Raises:
        ValueError: Raised when settings is None.
    """

    if settings is None:
        raise ValueError("settings must not be None")

    @application.exception_handler(RequestValidationError)
    async def api_handle_validation_error(request: Request, error: RequestValidationError) -> JSONResponse:
        field_errors = api_collect_field_errors(error)
        logger.warning("Validation error on %s %s: %s", request.method, request.url.path, field_errors)
        return envelope_response(
            envelope_error(VALIDATION_FAILED_MESSAGE, status.HTTP_400_BAD_REQUEST, field_errors),
            status.HTTP_400_BAD_REQUEST,
        )

    @application.exception_handler(Exception)
    async def api_handle_unexpected_error(request: Request, error: Exception) -> JSONResponse:
        logger.error("Unexpected error on %s %s", request.method, request.url.path, exc_info=error)
        details = None if settings.is_production else {"error": str(error)}
        return envelope_response(
            envelope_error(INTERNAL_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR, details),
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
