from __future__ import annotations

import logging
import socket
from typing import Callable

from healthcheck.models.records import NetworkStatus
from healthcheck.probes.base import BaseProbe

logger = logging.getLogger(__name__)

# Opens a connection to (host, port) or raises OSError
Connector = Callable[[str, int, float | None], None]


def tcp_connect(host: str, port: int, timeout: float | None) -> None:
    # No timeout given: fall back to the socket module default
    kwargs = {} if timeout is None else {"timeout": timeout}
    with socket.create_connection((host, port), **kwargs):
        pass


class NetworkConnectivityProbe(BaseProbe):
    """Single reachability test against a well-known public host.

    An unreachable host is a result, not a failure: any ``OSError`` becomes
    ``internet_connected=False``.
    """

    name = "network"

    def __init__(
        self,
        host: str = "8.8.8.8",
        port: int = 53,
        timeout: float | None = None,
        connector: Connector | None = None,
    ) -> None:
        self.host = host
        self.port = port
        self.timeout = timeout
        self._connect = connector or tcp_connect

    def collect(self) -> NetworkStatus:
        try:
            self._connect(self.host, self.port, self.timeout)
        except OSError as exc:
            logger.warning("Cannot reach %s:%d: %s", self.host, self.port, exc)
            return NetworkStatus(internet_connected=False)
        return NetworkStatus(internet_connected=True)
