from __future__ import annotations

from healthcheck.models.records import DiskRecord
from healthcheck.probes.base import BaseProbe
from healthcheck.probes.sources import PsutilSource, VolumeSource

GIB = 1024 ** 3


class DiskSpaceProbe(BaseProbe):
    """Reports free and total space for every fixed local volume."""

    name = "disk"

    def __init__(self, source: VolumeSource | None = None) -> None:
        self._source = source or PsutilSource()

    def collect(self) -> list[DiskRecord]:
        records: list[DiskRecord] = []
        for volume in self._source.volumes():
            if volume.total <= 0:
                continue
            records.append(
                DiskRecord(
                    drive=volume.drive,
                    free_space_percent=round(volume.free / volume.total * 100, 2),
                    free_space_gb=round(volume.free / GIB, 2),
                    total_space_gb=round(volume.total / GIB, 2),
                )
            )
        return records
