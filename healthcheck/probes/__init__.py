from .base import BaseProbe, CollectionError
from .cpu_probe import CpuProcessorProbe
from .disk_probe import DiskSpaceProbe
from .memory_probe import MemoryProbe
from .network_probe import NetworkConnectivityProbe
from .process_probe import TopProcessesProbe
from .sources import PsutilSource
from .update_probe import PendingUpdatesProbe, UpdateCheckError

__all__ = [
    "BaseProbe",
    "CollectionError",
    "CpuProcessorProbe",
    "DiskSpaceProbe",
    "MemoryProbe",
    "NetworkConnectivityProbe",
    "TopProcessesProbe",
    "PsutilSource",
    "PendingUpdatesProbe",
    "UpdateCheckError",
]
