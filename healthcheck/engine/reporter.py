from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import TextIO

from healthcheck.models import HealthReport

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "SystemHealthCheck"


# ── file output ─────────────────────────────────────────


def report_filename(timestamp: datetime, prefix: str = DEFAULT_PREFIX) -> str:
    return f"{prefix}_{timestamp:%Y%m%d_%H%M%S}.json"


def write_report(
    report: HealthReport,
    output_dir: str | Path = ".",
    prefix: str = DEFAULT_PREFIX,
    indent: int | None = 2,
) -> Path:
    """Serialize the report to JSON and return the written path."""
    path = Path(output_dir) / report_filename(report.timestamp, prefix)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(report.model_dump_json(by_alias=True, indent=indent), encoding="utf-8")
    logger.info("Report written to %s", path)
    return path


def load_report(path: str | Path) -> HealthReport:
    return HealthReport.model_validate_json(Path(path).read_text(encoding="utf-8"))


# ── console output ──────────────────────────────────────


def render_summary(report: HealthReport) -> str:
    """Human-readable summary of the report. Not meant for parsing."""
    lines = [
        f"System Health Check: {report.computer_name}",
        f"Timestamp: {report.timestamp:%Y-%m-%d %H:%M:%S}",
        "",
        "Disk Space",
    ]

    if report.disk is not None:
        lines.append(f"  {'Drive':<20} {'Free %':>8} {'Free GB':>10} {'Total GB':>10}")
        for d in report.disk:
            lines.append(
                f"  {d.drive:<20} {d.free_space_percent:>8.2f} "
                f"{d.free_space_gb:>10.2f} {d.total_space_gb:>10.2f}"
            )
    else:
        lines.append("  (not collected)")
    lines.append("")

    if report.cpu is not None:
        load = "n/a" if report.cpu.load_percent is None else f"{report.cpu.load_percent}%"
        lines.append(f"CPU Load: {load} ({report.cpu.name})")
    else:
        lines.append("CPU Load: (not collected)")

    if report.memory is not None:
        m = report.memory
        lines.append(
            f"Memory Usage: {m.used_percent:.2f}% "
            f"({m.free_gb:.2f} GB free of {m.total_gb:.2f} GB)"
        )
    else:
        lines.append("Memory Usage: (not collected)")
    lines.append("")

    lines.append("Top Processes (by CPU time)")
    if report.top_processes is not None:
        lines.append(f"  {'Name':<30} {'CPU (s)':>12} {'Memory (MB)':>12}")
        for p in report.top_processes:
            lines.append(f"  {p.name:<30} {p.cpu_time_seconds:>12.2f} {p.memory_mb:>12.2f}")
    else:
        lines.append("  (not collected)")
    lines.append("")

    connected = "(not collected)" if report.network is None else report.network.internet_connected
    lines.append(f"Internet Connected: {connected}")
    pending = "(not collected)" if report.updates is None else report.updates.pending_updates
    lines.append(f"Pending Updates: {pending}")

    if report.errors:
        lines.append("")
        lines.append("Failed probes:")
        for probe, error in sorted(report.errors.items()):
            lines.append(f"  {probe}: {error}")

    return "\n".join(lines)


def print_summary(report: HealthReport, stream: TextIO | None = None) -> None:
    print(render_summary(report), file=stream or sys.stdout)
