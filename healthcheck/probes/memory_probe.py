from __future__ import annotations

from healthcheck.models.records import MemoryRecord
from healthcheck.probes.base import BaseProbe
from healthcheck.probes.sources import MemorySource, PsutilSource

KB_PER_GB = 1024 * 1024


class MemoryProbe(BaseProbe):
    """Derives physical memory usage from total/free kilobytes."""

    name = "memory"

    def __init__(self, source: MemorySource | None = None) -> None:
        self._source = source or PsutilSource()

    def collect(self) -> MemoryRecord:
        info = self._source.memory()
        total, free = info.total_kb, info.free_kb
        return MemoryRecord(
            used_percent=round((total - free) / total * 100, 2),
            free_gb=round(free / KB_PER_GB, 2),
            total_gb=round(total / KB_PER_GB, 2),
        )
