from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

UNAVAILABLE = "unavailable"


class Record(BaseModel):
    """Immutable snapshot value serialized with camelCase keys."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class DiskRecord(Record):
    drive: str
    free_space_percent: float = Field(ge=0.0, le=100.0)
    free_space_gb: float = Field(alias="freeSpaceGB")
    total_space_gb: float = Field(alias="totalSpaceGB")


class CpuRecord(Record):
    load_percent: Annotated[int, Field(ge=0, le=100)] | None = None
    name: str = ""


class MemoryRecord(Record):
    used_percent: float
    free_gb: float = Field(alias="freeGB")
    total_gb: float = Field(alias="totalGB")


class ProcessRecord(Record):
    name: str
    cpu_time_seconds: float
    memory_mb: float = Field(alias="memoryMB")


class NetworkStatus(Record):
    internet_connected: bool


class UpdateStatus(Record):
    """Pending update count, or ``"unavailable"`` when the check failed."""

    pending_updates: Annotated[int, Field(ge=0)] | Literal["unavailable"]

    @property
    def available(self) -> bool:
        return self.pending_updates != UNAVAILABLE
