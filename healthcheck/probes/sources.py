"""Platform data sources queried by the probes.

Each probe depends on a small capability interface rather than on psutil
directly, so another backend can be passed to the probe constructor without
touching aggregation or reporting. :class:`PsutilSource` implements all of
them for Windows, Linux and macOS.
"""

from __future__ import annotations

import logging
import platform
from pathlib import Path
from typing import NamedTuple, Protocol

import psutil

logger = logging.getLogger(__name__)

_CPUINFO = Path("/proc/cpuinfo")
_NON_FIXED = {"cdrom", "removable"}  # psutil mount opts for non-fixed drives


class VolumeUsage(NamedTuple):
    drive: str
    total: int  # bytes
    free: int  # bytes


class ProcessorInfo(NamedTuple):
    load_percent: float | None
    name: str


class MemoryInfo(NamedTuple):
    total_kb: int
    free_kb: int


class ProcessSample(NamedTuple):
    name: str
    cpu_time: float  # user + system seconds since start
    rss: int  # working set, bytes


class VolumeSource(Protocol):
    def volumes(self) -> list[VolumeUsage]: ...


class ProcessorSource(Protocol):
    def processor(self) -> ProcessorInfo: ...


class MemorySource(Protocol):
    def memory(self) -> MemoryInfo: ...


class ProcessSource(Protocol):
    def processes(self) -> list[ProcessSample]: ...


class PsutilSource:
    """Default source backed by psutil."""

    def __init__(self, cpu_interval: float = 1.0) -> None:
        self.cpu_interval = cpu_interval

    def volumes(self) -> list[VolumeUsage]:
        results: list[VolumeUsage] = []
        for part in psutil.disk_partitions(all=False):
            opts = set(part.opts.split(","))
            if opts & _NON_FIXED or not part.fstype:
                continue
            usage = psutil.disk_usage(part.mountpoint)
            results.append(VolumeUsage(part.mountpoint, usage.total, usage.free))
        return results

    def processor(self) -> ProcessorInfo:
        try:
            load: float | None = psutil.cpu_percent(interval=self.cpu_interval)
        except NotImplementedError:
            logger.warning("CPU load reporting is not supported on this platform")
            load = None
        return ProcessorInfo(load, self._processor_name())

    def memory(self) -> MemoryInfo:
        vm = psutil.virtual_memory()
        return MemoryInfo(total_kb=vm.total // 1024, free_kb=vm.available // 1024)

    def processes(self) -> list[ProcessSample]:
        samples: list[ProcessSample] = []
        for proc in psutil.process_iter(["pid", "name", "cpu_times", "memory_info"]):
            try:
                info = proc.info
                # Windows "System Idle Process" reports total idle time as CPU time
                if info.get("pid") == 0:
                    continue
                cpu_times = info.get("cpu_times")
                mem = info.get("memory_info")
                samples.append(
                    ProcessSample(
                        name=info.get("name") or "",
                        cpu_time=(cpu_times.user + cpu_times.system) if cpu_times else 0.0,
                        rss=mem.rss if mem else 0,
                    )
                )
            except (psutil.NoSuchProcess, psutil.AccessDenied, psutil.ZombieProcess):
                continue
        return samples

    @staticmethod
    def _processor_name() -> str:
        name = platform.processor()
        if platform.system() == "Linux" and _CPUINFO.exists():
            try:
                for line in _CPUINFO.read_text(errors="replace").splitlines():
                    if line.lower().startswith("model name"):
                        return line.split(":", 1)[1].strip()
            except OSError:
                logger.debug("Cannot read %s", _CPUINFO)
        return name or platform.machine()
