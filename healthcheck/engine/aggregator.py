from __future__ import annotations

import logging
from datetime import datetime

from healthcheck.models import (
    CpuRecord,
    DiskRecord,
    HealthReport,
    MemoryRecord,
    NetworkStatus,
    ProbeResult,
    ProcessRecord,
    UpdateStatus,
)
from healthcheck.probes.base import CollectionError

logger = logging.getLogger(__name__)


def build_report(
    computer_name: str,
    timestamp: datetime,
    disk: list[DiskRecord] | None,
    cpu: CpuRecord | None,
    memory: MemoryRecord | None,
    top_processes: list[ProcessRecord] | None,
    network: NetworkStatus | None,
    updates: UpdateStatus | None,
    errors: dict[str, str] | None = None,
) -> HealthReport:
    """Assemble probe outputs and host identity into one report."""
    return HealthReport(
        computer_name=computer_name,
        timestamp=timestamp,
        disk=disk,
        cpu=cpu,
        memory=memory,
        top_processes=top_processes,
        network=network,
        updates=updates,
        errors=errors or {},
    )


def assemble_report(
    computer_name: str,
    timestamp: datetime,
    results: list[ProbeResult],
    allow_partial: bool = False,
) -> HealthReport:
    """Build a report from probe results.

    Raises :class:`CollectionError` if any probe failed, unless
    ``allow_partial`` is set, in which case failed sections are left empty
    and listed under ``errors``.
    """
    errors = {r.probe: r.error for r in results if not r.ok}
    if errors and not allow_partial:
        raise CollectionError(errors)
    if errors:
        logger.warning("Building partial report; failed probes: %s", ", ".join(sorted(errors)))

    values = {r.probe: r.value for r in results if r.ok}
    return build_report(
        computer_name,
        timestamp,
        disk=values.get("disk"),
        cpu=values.get("cpu"),
        memory=values.get("memory"),
        top_processes=values.get("top_processes"),
        network=values.get("network"),
        updates=values.get("updates"),
        errors=errors,
    )
