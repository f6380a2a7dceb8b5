from __future__ import annotations

import logging
import platform
import shutil
import subprocess
from typing import Callable, Protocol

from healthcheck.models.records import UNAVAILABLE, UpdateStatus
from healthcheck.probes.base import BaseProbe

logger = logging.getLogger(__name__)

_WINDOWS_QUERY = (
    "$s = (New-Object -ComObject Microsoft.Update.Session).CreateUpdateSearcher(); "
    "$s.Search('IsInstalled=0').Updates.Count"
)


class UpdateCheckError(RuntimeError):
    """The platform update facility could not be queried or parsed."""


class UpdateBackend(Protocol):
    name: str

    def pending_count(self) -> int: ...


def _run(cmd: list[str], timeout: float, ok_codes: tuple[int, ...] = (0,)) -> subprocess.CompletedProcess:
    proc = subprocess.run(cmd, capture_output=True, text=True, timeout=timeout)
    if proc.returncode not in ok_codes:
        raise UpdateCheckError(
            f"{cmd[0]} exited with {proc.returncode}: {proc.stderr.strip()}"
        )
    return proc


class _CommandBackend:
    name = "command"

    def __init__(self, timeout: float = 120.0) -> None:
        self.timeout = timeout


class WindowsUpdateBackend(_CommandBackend):
    """Counts not-installed updates via the Windows Update Agent COM API."""

    name = "windows_update"

    def pending_count(self) -> int:
        proc = _run(
            ["powershell", "-NoProfile", "-NonInteractive", "-Command", _WINDOWS_QUERY],
            self.timeout,
        )
        out = proc.stdout.strip()
        try:
            return int(out.splitlines()[-1])
        except (IndexError, ValueError):
            raise UpdateCheckError(f"unexpected Windows Update output: {out!r}") from None


class AptBackend(_CommandBackend):
    """Simulated ``apt-get upgrade``: one ``Inst`` line per pending package."""

    name = "apt"

    def pending_count(self) -> int:
        proc = _run(["apt-get", "-s", "-q", "upgrade"], self.timeout)
        return sum(1 for line in proc.stdout.splitlines() if line.startswith("Inst "))


class DnfBackend(_CommandBackend):
    """``dnf check-update`` exits 100 when updates are available, 0 when not.

    Each package is a ``name version repo`` row. A name too long for the
    column is printed alone, with version and repo on the next, indented line.
    """

    name = "dnf"

    def pending_count(self) -> int:
        proc = _run(["dnf", "-q", "check-update"], self.timeout, ok_codes=(0, 100))
        if proc.returncode == 0:
            return 0
        count = 0
        wrapped_name = False
        for line in proc.stdout.splitlines():
            if line.startswith("Obsoleting"):
                break
            fields = line.split()
            indented = line[:1].isspace()
            if not indented and len(fields) == 3:
                count += 1
            elif indented and len(fields) == 2 and wrapped_name:
                count += 1
            wrapped_name = not indented and len(fields) == 1
        return count


class PacmanBackend(_CommandBackend):
    """``checkupdates`` prints one package per line and exits 2 when up to date."""

    name = "pacman"

    def pending_count(self) -> int:
        proc = _run(["checkupdates"], self.timeout, ok_codes=(0, 2))
        if proc.returncode == 2:
            return 0
        return sum(1 for line in proc.stdout.splitlines() if line.strip())


class SoftwareUpdateBackend(_CommandBackend):
    """macOS ``softwareupdate -l`` marks each available update with ``*``."""

    name = "softwareupdate"

    def pending_count(self) -> int:
        proc = _run(["softwareupdate", "-l"], self.timeout)
        return sum(1 for line in proc.stdout.splitlines() if line.lstrip().startswith("* "))


_LINUX_BACKENDS: list[tuple[str, type[_CommandBackend]]] = [
    ("apt-get", AptBackend),
    ("dnf", DnfBackend),
    ("checkupdates", PacmanBackend),
]


def detect_backend(
    timeout: float = 120.0,
    system: str | None = None,
    which: Callable[[str], str | None] = shutil.which,
) -> UpdateBackend:
    """Pick the update backend for this platform."""
    system = system or platform.system()
    if system == "Windows":
        return WindowsUpdateBackend(timeout)
    if system == "Darwin":
        return SoftwareUpdateBackend(timeout)
    if system == "Linux":
        for tool, backend_cls in _LINUX_BACKENDS:
            if which(tool):
                return backend_cls(timeout)
    raise UpdateCheckError(f"no supported update backend on {system}")


class PendingUpdatesProbe(BaseProbe):
    """Counts updates not yet installed.

    This probe never fails: any error while querying the update facility
    (missing tool, insufficient privilege, timeout) yields the
    ``"unavailable"`` sentinel.
    """

    name = "updates"

    def __init__(self, backend: UpdateBackend | None = None, timeout: float = 120.0) -> None:
        self._backend = backend
        self.timeout = timeout

    def collect(self) -> UpdateStatus:
        try:
            backend = self._backend or detect_backend(self.timeout)
            count = backend.pending_count()
        except Exception as exc:
            logger.warning("Pending update check unavailable: %s", exc)
            return UpdateStatus(pending_updates=UNAVAILABLE)
        logger.debug("Update backend [%s] reports %d pending", backend.name, count)
        return UpdateStatus(pending_updates=count)
