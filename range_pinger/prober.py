"""
Параллельная проверка доступности диапазона адресов
"""

import asyncio
import logging
import time
from typing import List

from .address import AddressCodec
from .config import ProbeOutcome
from .host_range import generate
from .probe import PingProbe

logger = logging.getLogger(__name__)


class ConcurrentProber:
    """
    Проверка всех адресов диапазона одновременно

    На каждый адрес запускается одна задача; сканирование завершается
    только после того, как завершились все задачи. Ошибки и таймауты
    отдельных хостов в результат не попадают и сканирование не прерывают.

    Объект probe должен предоставлять корутину
    ``probe(address: str, timeout: float) -> bool``.
    """

    # Запас сверх таймаута, после которого зависшая проверка прерывается
    DEFAULT_GRACE = 2.0

    def __init__(self, probe=None, grace: float = DEFAULT_GRACE):
        self.probe = probe if probe is not None else PingProbe()
        self.grace = grace

    async def _probe_one(self, address: int, timeout: float) -> ProbeOutcome:
        """Проверка одного адреса; любая ошибка считается недоступностью"""
        text = AddressCodec.to_text(address)
        try:
            reachable = bool(await asyncio.wait_for(
                self.probe.probe(text, timeout),
                timeout=timeout + self.grace
            ))
        except asyncio.TimeoutError:
            logger.debug(f"Проверка {text} не завершилась за {timeout + self.grace:.1f} сек")
            reachable = False
        except Exception as e:
            logger.debug(f"Ошибка при проверке {text}: {e}")
            reachable = False
        return ProbeOutcome(address=address, reachable=reachable)

    async def probe_all(self, base_address: int, count: int,
                        timeout: float) -> List[ProbeOutcome]:
        """
        Проверка каждого адреса диапазона

        Returns:
            Результаты по всем адресам в порядке диапазона
        """
        tasks = [
            self._probe_one(address, timeout)
            for address in generate(base_address, count)
        ]
        if not tasks:
            return []
        return list(await asyncio.gather(*tasks))

    async def scan(self, base_address: int, count: int,
                   timeout: float) -> List[str]:
        """
        Сканирование диапазона

        Args:
            base_address: Первый адрес диапазона
            count: Количество адресов
            timeout: Таймаут одной проверки, секунды

        Returns:
            Доступные адреса по возрастанию
        """
        start_time = time.monotonic()
        logger.info(f"Проверка {count} адресов начиная с {AddressCodec.to_text(base_address)} "
                    f"(таймаут {timeout} сек)")

        outcomes = await self.probe_all(base_address, count, timeout)

        # Результаты объединяются только после завершения всех проверок
        alive = sorted({outcome.address for outcome in outcomes if outcome.reachable})

        elapsed = time.monotonic() - start_time
        logger.info(f"Проверка завершена за {elapsed:.1f} сек: "
                    f"{len(alive)} доступно, {count - len(alive)} недоступно")

        return [AddressCodec.to_text(address) for address in alive]

    def scan_sync(self, base_address: int, count: int, timeout: float) -> List[str]:
        """Синхронная обертка над scan()"""
        return asyncio.run(self.scan(base_address, count, timeout))
