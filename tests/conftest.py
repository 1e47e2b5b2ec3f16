"""
Настройки pytest и фикстуры для тестов range_pinger
"""

import asyncio
import ipaddress
import random
import socket
from types import SimpleNamespace

import pytest

from range_pinger.config import AdapterInfo


class StubProbe:
    """Заглушка проверки: ответ определяется предикатом по адресу"""

    def __init__(self, predicate, jitter: float = 0.0, delay: float = 0.0):
        self.predicate = predicate
        self.jitter = jitter
        self.delay = delay
        self.calls = []
        self.active = 0
        self.max_active = 0

    async def probe(self, address, timeout):
        self.calls.append((address, timeout))
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        try:
            if self.jitter:
                await asyncio.sleep(random.uniform(0, self.jitter))
            elif self.delay:
                await asyncio.sleep(self.delay)
            return self.predicate(address)
        finally:
            self.active -= 1


def ip(text):
    """Адрес в виде 32-битного числа"""
    return int(ipaddress.IPv4Address(text))


def even_low_octet(address):
    return int(address.rsplit(".", 1)[1]) % 2 == 0


@pytest.fixture
def always_up():
    return StubProbe(lambda address: True)


@pytest.fixture
def always_down():
    return StubProbe(lambda address: False)


@pytest.fixture
def adapter():
    """Адаптер в сети 192.168.1.0/24, диапазон начинается с .1"""
    return AdapterInfo(
        name="eth0",
        display_address="192.168.1.57",
        prefix_length=24,
        address_value=0xC0A80101
    )


def make_addr(family, address, netmask):
    return SimpleNamespace(family=family, address=address, netmask=netmask,
                           broadcast=None, ptp=None)


@pytest.fixture
def fake_interfaces():
    """psutil.net_if_addrs() / net_if_stats() типичного хоста"""
    addrs = {
        "lo": [make_addr(socket.AF_INET, "127.0.0.1", "255.0.0.0")],
        "eth0": [
            make_addr(socket.AF_INET6, "fe80::1", "ffff:ffff:ffff:ffff::"),
            make_addr(socket.AF_INET, "192.168.1.57", "255.255.255.0"),
        ],
        "wlan0": [make_addr(socket.AF_INET, "192.168.50.3", "255.255.255.0")],
        "ipv6only": [make_addr(socket.AF_INET6, "fd00::2", "ffff:ffff:ffff:ffff::")],
        "tun0": [make_addr(socket.AF_INET, "10.8.0.2", None)],
        "p2p": [make_addr(socket.AF_INET, "10.0.0.9", "255.255.255.252")],
    }
    stats = {
        "lo": SimpleNamespace(isup=True),
        "eth0": SimpleNamespace(isup=True),
        "wlan0": SimpleNamespace(isup=False),
        "ipv6only": SimpleNamespace(isup=True),
        "tun0": SimpleNamespace(isup=True),
        "p2p": SimpleNamespace(isup=True),
    }
    return addrs, stats
