from .records import (
    UNAVAILABLE,
    CpuRecord,
    DiskRecord,
    MemoryRecord,
    NetworkStatus,
    ProcessRecord,
    UpdateStatus,
)
from .report import HealthReport, ProbeResult

__all__ = [
    "UNAVAILABLE",
    "CpuRecord",
    "DiskRecord",
    "MemoryRecord",
    "NetworkStatus",
    "ProcessRecord",
    "UpdateStatus",
    "HealthReport",
    "ProbeResult",
]
