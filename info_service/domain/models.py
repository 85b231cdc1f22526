"""Typed domain models shared across runtime layers.

Every model is an immutable value object created per request. Field names
are snake_case in Python and rendered as camelCase on the wire.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base for frozen models rendered as camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class EndpointInfo(WireModel):
    """One advertised HTTP endpoint.

    Attributes:
        path: Route path.
        method: HTTP method name.
        description: Human-readable purpose of the endpoint.
    """

    path: str
    method: str
    description: str


class WelcomeData(WireModel):
    """Welcome payload with application identity and advertised endpoints.

    The endpoint sequence is validated into a new tuple on construction so
    later mutation of the caller's list cannot leak into this record, and
    `endpoint_list` hands out a fresh list on every read.

    Attributes:
        message: Greeting text.
        application: Application name.
        version: Application version.
        environment: Runtime environment label.
        endpoints: Advertised endpoints in display order.
    """

    message: str
    application: str
    version: str
    environment: str
    endpoints: tuple[EndpointInfo, ...]

    def endpoint_list(self) -> list[EndpointInfo]:
        """Return a caller-owned copy of the advertised endpoints.

        Returns:
            list[EndpointInfo]: New list with the stored endpoints.
        """

        return list(self.endpoints)


class MemoryInfo(WireModel):
    """Point-in-time process memory counters in bytes."""

    rss: int
    heap_total: int
    heap_used: int
    external: int
    array_buffers: int


class CpuInfo(WireModel):
    """Process CPU time in microseconds."""

    user: int
    system: int


class HealthData(WireModel):
    """Health payload reported by the health-check surfaces.

    Attributes:
        status: Overall service status, always `healthy` when produced.
        uptime: Seconds elapsed since process start.
        timestamp: ISO-8601 timestamp of the snapshot.
        memory: Process memory counters.
        version: Application version.
        environment: Runtime environment label.
    """

    status: str
    uptime: float
    timestamp: str
    memory: MemoryInfo
    version: str
    environment: str


class ApplicationInfo(WireModel):
    name: str
    version: str
    environment: str
    timestamp: str


class SystemDetails(WireModel):
    """Host and runtime details.

    Attributes:
        platform: Lower-cased operating system name.
        arch: Machine architecture string.
        runtime_version: Interpreter version string.
        uptime: Seconds elapsed since process start.
        memory: Process memory counters.
        cpu: Process CPU time counters.
    """

    platform: str
    arch: str
    runtime_version: str
    uptime: float
    memory: MemoryInfo
    cpu: CpuInfo


class EnvironmentInfo(WireModel):
    env_name: str
    port: str
    host: str


class SystemInfo(WireModel):
    """Composite application, host and environment report."""

    application: ApplicationInfo
    system: SystemDetails
    environment: EnvironmentInfo


class GreetingRequest(WireModel):
    """Greet request body; field rules are enforced by `domain_validate_greeting`."""

    name: str | None = None


class GreetingData(WireModel):
    """Greeting response returned by the versioned greet endpoint."""

    message: str
    timestamp: str
