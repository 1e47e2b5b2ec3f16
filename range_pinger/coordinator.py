"""
Сканирование диапазона выбранного адаптера
"""

import asyncio
import logging
import time
from typing import Optional

from .address import FULL_MASK
from .config import AdapterInfo, ScanResult, ScannerConfig
from .exceptions import InvalidPrefixError, InvalidAdapterError
from .host_range import HostRange, check_range_size
from .prober import ConcurrentProber

logger = logging.getLogger(__name__)


class ScanCoordinator:
    """AdapterInfo -> диапазон -> параллельная проверка -> ScanResult"""

    def __init__(self, config: Optional[ScannerConfig] = None,
                 prober: Optional[ConcurrentProber] = None):
        self.config = config or ScannerConfig()
        self.prober = prober or ConcurrentProber()

    def host_range(self, adapter: AdapterInfo) -> HostRange:
        """
        Диапазон хостов адаптера

        Raises:
            InvalidAdapterError: длина префикса вне [0, 32] или диапазон
                выходит за пределы адресного пространства IPv4
            RangeTooLargeError: диапазон больше config.max_hosts
        """
        try:
            host_range = HostRange.for_prefix(adapter.address_value, adapter.prefix_length)
        except InvalidPrefixError as e:
            raise InvalidAdapterError(adapter.name, adapter.prefix_length) from e

        if not 0 <= adapter.address_value <= FULL_MASK:
            raise InvalidAdapterError(
                adapter.name, adapter.prefix_length,
                f"адрес {adapter.address_value} вне диапазона IPv4"
            )
        last_address = host_range.base_address + host_range.host_count - 1
        if host_range.host_count and last_address > FULL_MASK:
            raise InvalidAdapterError(
                adapter.name, adapter.prefix_length,
                f"диапазон из {host_range.host_count} адресов выходит за 255.255.255.255"
            )

        check_range_size(host_range.host_count, self.config.max_hosts)
        return host_range

    async def _scan(self, adapter: AdapterInfo, host_range: HostRange) -> ScanResult:
        logger.info(f"Сканирование адаптера {adapter.name} "
                    f"({adapter.display_address}/{adapter.prefix_length}): "
                    f"{host_range.host_count} адресов")

        start_time = time.monotonic()
        addresses = await self.prober.scan(
            host_range.base_address,
            host_range.host_count,
            self.config.timeout
        )

        return ScanResult(
            addresses=addresses,
            adapter_name=adapter.name,
            hosts_scanned=host_range.host_count,
            scan_duration=time.monotonic() - start_time
        )

    async def run_scan_async(self, adapter: AdapterInfo) -> ScanResult:
        """Сканирование диапазона адаптера"""
        return await self._scan(adapter, self.host_range(adapter))

    def run_scan(self, adapter: AdapterInfo) -> ScanResult:
        """Синхронный запуск сканирования"""
        # Параметры проверяются до запуска цикла событий
        host_range = self.host_range(adapter)
        return asyncio.run(self._scan(adapter, host_range))
