from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, Field

from healthcheck.models.records import (
    CpuRecord,
    DiskRecord,
    MemoryRecord,
    NetworkStatus,
    ProcessRecord,
    Record,
    UpdateStatus,
)


class HealthReport(Record):
    """Composite snapshot of every probe for one run.

    A section is ``None`` only in a partial report, in which case the
    failing probe is listed in ``errors``.
    """

    computer_name: str
    timestamp: datetime
    disk: list[DiskRecord] | None = None
    cpu: CpuRecord | None = None
    memory: MemoryRecord | None = None
    top_processes: Annotated[list[ProcessRecord], Field(max_length=5)] | None = None
    network: NetworkStatus | None = None
    updates: UpdateStatus | None = None
    errors: dict[str, str] = Field(default_factory=dict)

    @property
    def complete(self) -> bool:
        return not self.errors


class ProbeResult(BaseModel):
    """Outcome of one probe run: a value or the error that prevented it."""

    probe: str
    value: Any = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
