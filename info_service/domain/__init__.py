"""Domain models used across application layer boundaries."""

from .models import (
    ApplicationInfo,
    CpuInfo,
    EndpointInfo,
    EnvironmentInfo,
    GreetingData,
    GreetingRequest,
    HealthData,
    MemoryInfo,
    SystemDetails,
    SystemInfo,
    WelcomeData,
    WireModel,
)
from .serialization import domain_to_payload
from .validation import domain_validate_greeting

__all__ = [
    "ApplicationInfo",
    "CpuInfo",
    "EndpointInfo",
    "EnvironmentInfo",
    "GreetingData",
    "GreetingRequest",
    "HealthData",
    "MemoryInfo",
    "SystemDetails",
    "SystemInfo",
    "WelcomeData",
    "WireModel",
    "domain_to_payload",
    "domain_validate_greeting",
]
