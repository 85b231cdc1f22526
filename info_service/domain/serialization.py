"""Rendering of wire models into JSON-ready payloads."""

from typing import Any

from pydantic import BaseModel


def domain_to_payload(model: BaseModel) -> dict[str, Any]:
    """Render a model with camelCase keys and without unset (None) fields.

    Args:
        model: Wire model to render.

    Returns:
        dict[str, Any]: JSON-compatible sparse payload.
    """

    return model.model_dump(mode="json", by_alias=True, exclude_none=True)
