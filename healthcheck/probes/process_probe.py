from __future__ import annotations

from healthcheck.models.records import ProcessRecord
from healthcheck.probes.base import BaseProbe
from healthcheck.probes.sources import ProcessSource, PsutilSource

MIB = 1024 * 1024
MAX_PROCESSES = 5


class TopProcessesProbe(BaseProbe):
    """Lists the processes that have consumed the most CPU time."""

    name = "top_processes"

    def __init__(self, source: ProcessSource | None = None, limit: int = MAX_PROCESSES) -> None:
        self._source = source or PsutilSource()
        self.limit = min(limit, MAX_PROCESSES)

    def collect(self) -> list[ProcessRecord]:
        # sorted() is stable: equal CPU times keep enumeration order
        ranked = sorted(self._source.processes(), key=lambda p: p.cpu_time, reverse=True)
        return [
            ProcessRecord(
                name=sample.name,
                cpu_time_seconds=round(sample.cpu_time, 2),
                memory_mb=round(sample.rss / MIB, 2),
            )
            for sample in ranked[: self.limit]
        ]
