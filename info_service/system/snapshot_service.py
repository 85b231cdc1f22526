"""Runtime snapshot reader backed by psutil process counters."""

import logging
import platform
import time
from datetime import datetime, timezone

import psutil

from info_service.config import AppSettings
from info_service.domain import (
    ApplicationInfo,
    CpuInfo,
    EnvironmentInfo,
    HealthData,
    MemoryInfo,
    SystemDetails,
    SystemInfo,
)

from .interfaces import SystemSnapshotPort

logger = logging.getLogger(__name__)

MICROSECONDS_PER_SECOND = 1_000_000


def system_utc_timestamp() -> str:
    """Return the current UTC time as an ISO-8601 string.

    Returns:
        str: Timestamp such as `2026-01-01T12:00:00.000000+00:00`.
    """

    return datetime.now(timezone.utc).isoformat()


def system_resolve_process_start_time() -> float:
    """Resolve the epoch timestamp at which the current process started.

    Returns:
        float: Process creation time reported by the OS, or the current time
            when the OS does not expose it.
    """

    try:
        return psutil.Process().create_time()
    except psutil.Error:
        logger.warning("Process creation time unavailable; using current time as start time")
        return time.time()


class PsutilSystemSnapshotService(SystemSnapshotPort):
    """Snapshot reader that reads live process counters on every call.

    Counters that the platform does not expose degrade to zero instead of
    raising.
    """

    def __init__(self, settings: AppSettings, process_started_at: float):
        """Initialize snapshot reader.

        Args:
            settings: Settings supplying application identity and binding.
            process_started_at: Epoch seconds at which the process started.

        Raises:
            ValueError: Raised when settings is None.
        """

        if settings is None:
            raise ValueError("settings must not be None")
        self._settings = settings
        self._process_started_at = process_started_at
        self._process = psutil.Process()

    @property
    def process_started_at(self) -> float:
        return self._process_started_at

    def system_get_uptime_seconds(self) -> float:
        return max(0.0, time.time() - self._process_started_at)

    def system_get_memory_info(self) -> MemoryInfo:
        """Read process memory counters.

        `heap_used` prefers the unique set size and falls back to the resident
        set size where the full memory breakdown is not permitted.

        Returns:
            MemoryInfo: Memory counters in bytes, zeroed when unreadable.
        """

        try:
            memory = self._process.memory_info()
        except psutil.Error:
            logger.warning("Process memory counters unavailable; reporting zeros")
            return MemoryInfo(rss=0, heap_total=0, heap_used=0, external=0, array_buffers=0)

        try:
            heap_used = int(self._process.memory_full_info().uss)
        except (psutil.Error, AttributeError):
            heap_used = int(memory.rss)

        return MemoryInfo(
            rss=int(memory.rss),
            heap_total=int(memory.vms),
            heap_used=heap_used,
            external=int(getattr(memory, "shared", 0)),
            array_buffers=0,
        )

    def system_get_cpu_info(self) -> CpuInfo:
        try:
            cpu_times = self._process.cpu_times()
        except psutil.Error:
            return CpuInfo(user=0, system=0)
        return CpuInfo(
            user=int(cpu_times.user * MICROSECONDS_PER_SECOND),
            system=int(cpu_times.system * MICROSECONDS_PER_SECOND),
        )

    def system_get_health_data(self) -> HealthData:
        return HealthData(
            status="healthy",
            uptime=self.system_get_uptime_seconds(),
            timestamp=system_utc_timestamp(),
            memory=self.system_get_memory_info(),
            version=self._settings.application_version,
            environment=self._settings.environment_name,
        )

    def system_get_system_info(self) -> SystemInfo:
        """Compose application, host and environment details.

        Returns:
            SystemInfo: Snapshot with lower-cased platform name, architecture,
                interpreter version, uptime, memory and CPU counters.
        """

        application_info = ApplicationInfo(
            name=self._settings.application_name,
            version=self._settings.application_version,
            environment=self._settings.environment_name,
            timestamp=system_utc_timestamp(),
        )
        system_details = SystemDetails(
            platform=(platform.system() or "unknown").lower(),
            arch=platform.machine() or "unknown",
            runtime_version=platform.python_version(),
            uptime=self.system_get_uptime_seconds(),
            memory=self.system_get_memory_info(),
            cpu=self.system_get_cpu_info(),
        )
        environment_info = EnvironmentInfo(
            env_name=self._settings.environment_name,
            port=str(self._settings.application_port),
            host=self._settings.application_host,
        )
        return SystemInfo(application=application_info, system=system_details, environment=environment_info)
