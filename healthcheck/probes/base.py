from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from healthcheck.models.report import ProbeResult

logger = logging.getLogger(__name__)


class CollectionError(RuntimeError):
    """Raised when a run cannot produce a report because probes failed."""

    def __init__(self, failed: dict[str, str]) -> None:
        self.failed = failed
        names = ", ".join(sorted(failed))
        super().__init__(f"probe(s) failed: {names}")


class BaseProbe(ABC):
    """Abstract base for all health probes.

    Subclasses implement ``collect()`` which queries one OS subsystem and
    returns a record (or list of records). ``run()`` wraps the outcome in a
    :class:`ProbeResult` so the caller decides whether a failure is fatal.
    """

    name: str = "base"

    # ── abstract method ─────────────────────────────────

    @abstractmethod
    def collect(self) -> Any:
        """Query the data source and return this probe's record(s)."""
        ...

    # ── execution ───────────────────────────────────────

    def run(self) -> ProbeResult:
        logger.debug("Probe [%s] collecting", self.name)
        try:
            value = self.collect()
        except Exception as exc:
            logger.exception("Probe [%s] error during collect()", self.name)
            return ProbeResult(probe=self.name, error=f"{type(exc).__name__}: {exc}")
        return ProbeResult(probe=self.name, value=value)
