"""API layer package for FastAPI application and route composition."""

from .application import create_api_application
from .envelope import ResponseEnvelope, envelope_error, envelope_success, envelope_to_payload

__all__ = [
    "ResponseEnvelope",
    "create_api_application",
    "envelope_error",
    "envelope_success",
    "envelope_to_payload",
]
