from __future__ import annotations

import pytest

from healthcheck.probes.sources import MemoryInfo, ProcessorInfo, ProcessSample, VolumeUsage

GIB = 1024 ** 3


class FakeSource:
    """In-memory stand-in for every probe data source."""

    def __init__(
        self,
        volumes: list[VolumeUsage] | None = None,
        processor: ProcessorInfo | None = None,
        memory: MemoryInfo | None = None,
        processes: list[ProcessSample] | None = None,
    ) -> None:
        self._volumes = volumes if volumes is not None else [VolumeUsage("C:\\", 100 * GIB, 25 * GIB)]
        self._processor = processor or ProcessorInfo(42.0, "Test CPU @ 3.00GHz")
        self._memory = memory or MemoryInfo(total_kb=16_000_000, free_kb=4_000_000)
        self._processes = processes if processes is not None else [
            ProcessSample("idle", 10.0, 8 * 1024 * 1024),
            ProcessSample("python", 250.5, 120 * 1024 * 1024),
            ProcessSample("browser", 99.25, 512 * 1024 * 1024),
        ]

    def volumes(self) -> list[VolumeUsage]:
        return self._volumes

    def processor(self) -> ProcessorInfo:
        return self._processor

    def memory(self) -> MemoryInfo:
        return self._memory

    def processes(self) -> list[ProcessSample]:
        return self._processes


class FakeUpdateBackend:
    name = "fake"

    def __init__(self, count: int = 0, error: Exception | None = None) -> None:
        self.count = count
        self.error = error

    def pending_count(self) -> int:
        if self.error is not None:
            raise self.error
        return self.count


@pytest.fixture
def make_source():
    """Factory for in-memory data sources; keyword arguments override the defaults."""
    return FakeSource


@pytest.fixture
def make_update_backend():
    return FakeUpdateBackend
