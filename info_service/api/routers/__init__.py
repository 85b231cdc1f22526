"""API router package for endpoint composition."""

from .root import api_create_root_router
from .v1 import api_create_v1_router

__all__ = ["api_create_root_router", "api_create_v1_router"]
