from __future__ import annotations

from healthcheck.models.records import CpuRecord
from healthcheck.probes.base import BaseProbe
from healthcheck.probes.sources import ProcessorSource, PsutilSource


class CpuProcessorProbe(BaseProbe):
    """Reads aggregate processor load and the processor name.

    A missing load figure is reported as ``None`` rather than treated as a
    failure.
    """

    name = "cpu"

    def __init__(self, source: ProcessorSource | None = None) -> None:
        self._source = source or PsutilSource()

    def collect(self) -> CpuRecord:
        info = self._source.processor()
        load = None if info.load_percent is None else int(round(info.load_percent))
        return CpuRecord(load_percent=load, name=info.name)
