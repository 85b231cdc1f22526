"""Explicit input validation returning field-to-message mappings."""

from typing import Any

GREETING_NAME_MIN_LENGTH = 2
GREETING_NAME_MAX_LENGTH = 50


def domain_validate_greeting(payload: Any) -> dict[str, str]:
    """Validate a greet request body.

    Args:
        payload: Decoded JSON request body.

    Returns:
        dict[str, str]: Field name to error message; empty when valid.
    """

    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        return {"body": "request body must be a JSON object"}

    errors: dict[str, str] = {}
    name = payload.get("name")
    if name is None:
        errors["name"] = "Name is required"
    elif not isinstance(name, str):
        errors["name"] = "Name must be a string"
    elif not name.strip():
        errors["name"] = "Name must not be blank"
    elif not GREETING_NAME_MIN_LENGTH <= len(name.strip()) <= GREETING_NAME_MAX_LENGTH:
        errors["name"] = (
            f"Name must be between {GREETING_NAME_MIN_LENGTH} and {GREETING_NAME_MAX_LENGTH} characters"
        )
    return errors
