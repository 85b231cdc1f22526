"""Uniform response envelope wrapping every enveloped JSON response.

Exactly one of `success` and `error` is set on an envelope. Unset fields are
left out of the rendered payload entirely rather than emitted as null, so
clients can test for key presence.
"""

from typing import Any

from fastapi.responses import JSONResponse

from info_service.domain import WireModel, domain_to_payload
from info_service.system import system_utc_timestamp


class ResponseEnvelope(WireModel):
    """Immutable response envelope.

    Attributes:
        success: True on success envelopes, otherwise unset.
        error: True on error envelopes, otherwise unset.
        data: Payload on success, optional error details on error.
        message: Error message.
        status_code: HTTP status code, always set on errors.
        timestamp: ISO-8601 creation time.
    """

    success: bool | None = None
    error: bool | None = None
    data: Any = None
    message: str | None = None
    status_code: int | None = None
    timestamp: str


def envelope_success(data: Any, status_code: int | None = None) -> ResponseEnvelope:
    """Build a success envelope.

    Args:
        data: Response payload.
        status_code: Optional HTTP status code echoed in the body.

    Returns:
        ResponseEnvelope: Envelope with `success` set.
    """

    return ResponseEnvelope(
        timestamp=system_utc_timestamp(),
        success=True,
        data=data,
        status_code=status_code,
    )


def envelope_error(message: str, status_code: int, details: Any = None) -> ResponseEnvelope:
    """Build an error envelope.

    Args:
        message: Human-readable error message.
        status_code: HTTP status code of the failure.
        details: Optional error-detail payload carried in the data slot.

    Returns:
        ResponseEnvelope: Envelope with `error` set.
    """

    return ResponseEnvelope(
        timestamp=system_utc_timestamp(),
        error=True,
        data=details,
        message=message,
        status_code=status_code,
    )


def envelope_to_payload(envelope: ResponseEnvelope) -> dict[str, Any]:
    """Render an envelope into a sparse camelCase JSON object.

    Args:
        envelope: Envelope to render.

    Returns:
        dict[str, Any]: JSON-compatible payload without unset fields.
    """

    return domain_to_payload(envelope)


def envelope_response(envelope: ResponseEnvelope, http_status: int) -> JSONResponse:
    """Wrap an envelope into a JSON response with the given HTTP status.

    Args:
        envelope: Envelope to render.
        http_status: HTTP status of the response.

    Returns:
        JSONResponse: Framework response carrying the sparse payload.
    """

    return JSONResponse(content=envelope_to_payload(envelope), status_code=http_status)
