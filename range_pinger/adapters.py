"""
Список сетевых адаптеров с IPv4 адресами
"""

import ipaddress
import logging
import socket
from typing import List, Optional

import psutil

from .address import AddressCodec
from .config import AdapterInfo
from .exceptions import AdapterNotFoundError

logger = logging.getLogger(__name__)


class AdapterDirectory:
    """Активные сетевые адаптеры, кроме loopback"""

    def get_adapters(self) -> List[AdapterInfo]:
        """
        Получение списка адаптеров

        Для каждого адаптера берется первый IPv4 адрес с маской.
        address_value указывает на первый хост сети адаптера.

        Returns:
            Список адаптеров в порядке, возвращаемом системой
        """
        stats = psutil.net_if_stats()
        adapters = []

        for name, addresses in psutil.net_if_addrs().items():
            if not self._is_operational(name, stats):
                continue

            adapter = self._build_adapter(name, addresses)
            if adapter is None:
                continue
            adapters.append(adapter)

        logger.debug(f"Найдено адаптеров: {len(adapters)}")
        return adapters

    @staticmethod
    def _is_operational(name: str, stats) -> bool:
        stat = stats.get(name)
        return stat is not None and stat.isup

    @staticmethod
    def _build_adapter(name: str, addresses) -> Optional[AdapterInfo]:
        for addr in addresses:
            if addr.family != socket.AF_INET or not addr.netmask:
                continue
            try:
                interface = ipaddress.IPv4Interface(f"{addr.address}/{addr.netmask}")
            except ValueError as e:
                logger.debug(f"Пропущен адрес {addr.address} адаптера {name}: {e}")
                continue

            if interface.ip.is_loopback:
                return None

            prefix_length = interface.network.prefixlen
            return AdapterInfo(
                name=name,
                display_address=str(interface.ip),
                prefix_length=prefix_length,
                address_value=AddressCodec.encode(interface.ip.packed, prefix_length)
            )

        return None

    def find_by_number(self, number: int) -> AdapterInfo:
        """Адаптер по номеру в списке (с 1)"""
        adapters = self.get_adapters()
        index = number - 1
        if 0 <= index < len(adapters):
            return adapters[index]
        raise AdapterNotFoundError(
            f"Некорректный номер адаптера: {number}",
            {"available": len(adapters)}
        )

    def find_by_ip(self, ip_prefix: str) -> AdapterInfo:
        """Первый адаптер, адрес которого начинается с ip_prefix"""
        for adapter in self.get_adapters():
            if adapter.display_address.startswith(ip_prefix):
                return adapter
        raise AdapterNotFoundError(f"Адаптер с адресом {ip_prefix} не найден")
