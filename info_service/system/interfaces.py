"""Typed interfaces for runtime snapshot readers."""

from typing import Protocol

from info_service.domain import CpuInfo, HealthData, MemoryInfo, SystemInfo


class SystemSnapshotPort(Protocol):
    """Port definition for point-in-time process and host introspection."""

    def system_get_uptime_seconds(self) -> float:
        """Return wall-clock seconds elapsed since process start.

        Returns:
            float: Non-negative uptime in seconds.
        """

    def system_get_memory_info(self) -> MemoryInfo:
        """Return current process memory counters.

        Returns:
            MemoryInfo: Memory snapshot taken at call time.
        """

    def system_get_cpu_info(self) -> CpuInfo:
        """Return process CPU time counters.

        Returns:
            CpuInfo: CPU counters, zeroed when unavailable.
        """

    def system_get_health_data(self) -> HealthData:
        """Return the health payload for health-check surfaces.

        Returns:
            HealthData: Health snapshot.
        """

    def system_get_system_info(self) -> SystemInfo:
        """Return the composite application and host report.

        Returns:
            SystemInfo: System snapshot.
        """
