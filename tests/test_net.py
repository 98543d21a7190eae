import socket
import time
from datetime import timedelta

import pytest

from gomono.net import check_addr_available


@pytest.fixture
def listening_port():
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    server.bind(("127.0.0.1", 0))
    server.listen(5)
    yield server.getsockname()[1]
    server.close()


@pytest.fixture
def closed_port():
    probe = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    return port


def test_available_address(listening_port):
    assert check_addr_available(f"127.0.0.1:{listening_port}", 2.0) is True


def test_available_with_timedelta(listening_port):
    assert check_addr_available(f"127.0.0.1:{listening_port}", timedelta(seconds=2)) is True


def test_unavailable_address_times_out(closed_port):
    start = time.monotonic()
    assert check_addr_available(f"127.0.0.1:{closed_port}", 0.5) is False
    assert time.monotonic() - start >= 0.45


def test_malformed_address_is_unavailable():
    assert check_addr_available("no-port-here", 0.3) is False


def test_zero_timeout_is_unavailable(listening_port):
    assert check_addr_available(f"127.0.0.1:{listening_port}", 0) is False