"""Tests for the psutil-backed runtime snapshot reader."""

import time

import psutil

from info_service.config import AppSettings
from info_service.domain import CpuInfo, MemoryInfo
from info_service.system import PsutilSystemSnapshotService, system_resolve_process_start_time


class _DeniedProcess:
    """Process double whose counters are all inaccessible."""

    def memory_info(self):
        raise psutil.AccessDenied()

    def memory_full_info(self):
        raise psutil.AccessDenied()

    def cpu_times(self):
        raise psutil.AccessDenied()


def _build_service(process_started_at: float | None = None) -> PsutilSystemSnapshotService:
    settings = AppSettings(
        application_name="learn-python",
        application_version="2.0.0",
        environment_name="test",
        application_port=9090,
    )
    started_at = time.time() if process_started_at is None else process_started_at
    return PsutilSystemSnapshotService(settings=settings, process_started_at=started_at)


def test_system_uptime_counts_from_injected_start_time() -> None:
    """Measure uptime against the injected start timestamp.

    Returns:
        None: Assertions validate uptime arithmetic.

    Raises:
        AssertionError: Raised when uptime is not derived from start time.
    """

    service = _build_service(process_started_at=time.time() - 30.0)

    uptime = service.system_get_uptime_seconds()

    assert 30.0 <= uptime < 60.0
    assert service.process_started_at <= time.time() - 30.0


def test_system_uptime_is_never_negative() -> None:
    service = _build_service(process_started_at=time.time() + 3600.0)

    assert service.system_get_uptime_seconds() == 0.0


def test_system_resolve_process_start_time_is_in_the_past() -> None:
    assert system_resolve_process_start_time() <= time.time()


def test_system_memory_info_reports_non_negative_integers() -> None:
    memory = _build_service().system_get_memory_info()

    for value in (memory.rss, memory.heap_total, memory.heap_used, memory.external, memory.array_buffers):
        assert isinstance(value, int)
        assert value >= 0
    assert memory.rss > 0


def test_system_counters_degrade_to_zero_when_unavailable() -> None:
    """Substitute zeroed counters when the OS denies access.

    Returns:
        None: Assertions validate degrade-to-zero policy.

    Raises:
        AssertionError: Raised when an error propagates or values are non-zero.
    """

    service = _build_service()
    service._process = _DeniedProcess()

    assert service.system_get_memory_info() == MemoryInfo(
        rss=0, heap_total=0, heap_used=0, external=0, array_buffers=0
    )
    assert service.system_get_cpu_info() == CpuInfo(user=0, system=0)


def test_system_health_data_reports_healthy_status() -> None:
    health = _build_service().system_get_health_data()

    assert health.status == "healthy"
    assert health.uptime >= 0
    assert health.version == "2.0.0"
    assert health.environment == "test"


def test_system_info_composes_settings_and_host_details() -> None:
    """Compose application identity, host details and binding info.

    Returns:
        None: Assertions validate composed snapshot.

    Raises:
        AssertionError: Raised when composed fields differ.
    """

    system_info = _build_service().system_get_system_info()

    assert system_info.application.name == "learn-python"
    assert system_info.application.version == "2.0.0"
    assert system_info.system.platform == system_info.system.platform.lower()
    assert system_info.system.platform
    assert system_info.system.arch
    assert system_info.system.runtime_version.count(".") == 2
    assert system_info.system.cpu.user >= 0
    assert system_info.environment.port == "9090"
    assert system_info.environment.host == "0.0.0.0"
