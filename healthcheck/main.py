"""One-shot local machine health check.

Usage:
    system-health-check                       # collect, write JSON, print summary
    system-health-check --output-dir reports
    system-health-check --allow-partial --quiet
"""

from __future__ import annotations

import argparse
import logging
import socket
from datetime import datetime
from pathlib import Path
from typing import TextIO

from healthcheck.config import Settings, settings
from healthcheck.engine import assemble_report, print_summary, write_report
from healthcheck.models import HealthReport
from healthcheck.probes import (
    BaseProbe,
    CollectionError,
    CpuProcessorProbe,
    DiskSpaceProbe,
    MemoryProbe,
    NetworkConnectivityProbe,
    PendingUpdatesProbe,
    PsutilSource,
    TopProcessesProbe,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_PARTIAL = 2


def build_probes(cfg: Settings) -> list[BaseProbe]:
    source = PsutilSource(cpu_interval=cfg.cpu_sample_interval)
    return [
        DiskSpaceProbe(source),
        CpuProcessorProbe(source),
        MemoryProbe(source),
        TopProcessesProbe(source),
        NetworkConnectivityProbe(
            host=cfg.network_host,
            port=cfg.network_port,
            timeout=cfg.network_timeout,
        ),
        PendingUpdatesProbe(timeout=cfg.update_timeout),
    ]


def run_health_check(
    cfg: Settings = settings,
    probes: list[BaseProbe] | None = None,
    computer_name: str | None = None,
    now: datetime | None = None,
    console: bool = True,
    stream: TextIO | None = None,
) -> tuple[HealthReport, Path]:
    """Run every probe in order, then write and print the report.

    Raises :class:`CollectionError` when a probe fails and partial reports
    are disabled; nothing is written in that case.
    """
    if probes is None:
        probes = build_probes(cfg)
    if computer_name is None:
        computer_name = socket.gethostname()
    if now is None:
        now = datetime.now().astimezone()

    results = [probe.run() for probe in probes]
    report = assemble_report(
        computer_name, now, results, allow_partial=cfg.allow_partial_report
    )
    path = write_report(
        report, cfg.output_dir, prefix=cfg.report_prefix, indent=cfg.json_indent
    )
    if console:
        print_summary(report, stream)
    return report, path


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Collect a local machine health snapshot")
    parser.add_argument("--output-dir", help="Directory for the JSON report")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, help="Logging level")
    parser.add_argument(
        "--allow-partial",
        action="store_true",
        default=None,
        help="Write a report even if some probes fail",
    )
    parser.add_argument("--quiet", action="store_true", help="Do not print the console summary")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    overrides = {
        "output_dir": args.output_dir,
        "log_level": args.log_level,
        "allow_partial_report": args.allow_partial,
    }
    cfg = settings.model_copy(update={k: v for k, v in overrides.items() if v is not None})

    logging.basicConfig(level=cfg.log_level.upper(), format=LOG_FORMAT)
    logger.info("%s starting", cfg.app_name)

    try:
        report, _ = run_health_check(cfg, console=not args.quiet)
    except CollectionError as exc:
        logger.error("Health check aborted, no report written: %s", exc)
        return EXIT_FAILED

    if not report.complete:
        return EXIT_PARTIAL
    return EXIT_OK
