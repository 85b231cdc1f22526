"""Runtime introspection package for process and host snapshots."""

from .interfaces import SystemSnapshotPort
from .snapshot_service import (
    PsutilSystemSnapshotService,
    system_resolve_process_start_time,
    system_utc_timestamp,
)

__all__ = [
    "PsutilSystemSnapshotService",
    "SystemSnapshotPort",
    "system_resolve_process_start_time",
    "system_utc_timestamp",
]
