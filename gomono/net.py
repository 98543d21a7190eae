"""Network helpers."""

from __future__ import annotations

import socket
import time
from datetime import timedelta
from typing import Union

_RETRY_INTERVAL = 0.2


def _split_host_port(addr: str) -> tuple[str, int]:
    host, sep, port = addr.rpartition(":")
    if not sep:
        raise ValueError(f"missing port in address {addr!r}")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    return host, int(port)


def check_addr_available(addr: str, timeout: Union[float, timedelta]) -> bool:
    """Keep trying a TCP connection to host:port until it succeeds or timeout (seconds) runs out."""
    seconds = timeout.total_seconds() if isinstance(timeout, timedelta) else float(timeout)
    deadline = time.monotonic() + seconds
    while True:
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            return False
        try:
            host, port = _split_host_port(addr)
            with socket.create_connection((host, port), timeout=remaining):
                return True
        except (OSError, ValueError):
            pass
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            return False
        time.sleep(min(_RETRY_INTERVAL, remaining))