"""
Проверка доступности хоста системной командой ping
"""

import asyncio
import logging
import platform
import shutil
from typing import List, Optional

from .config import PingResult

logger = logging.getLogger(__name__)


class PingProbe:
    """Одна проверка ping на адрес, без повторов"""

    def __init__(self, system: Optional[str] = None):
        self.system = (system or platform.system()).lower()

    def build_command(self, address: str, timeout: float) -> List[str]:
        """Построение команды ping"""
        if self.system == 'windows':
            return ['ping', '-n', '1', '-w', str(int(timeout * 1000)), address]
        # -W в секундах, не меньше 1
        return ['ping', '-c', '1', '-W', str(max(1, int(round(timeout)))), address]

    async def check(self, address: str, timeout: float) -> PingResult:
        """
        Выполнение ping для одного адреса

        Returns:
            Результат проверки
        """
        cmd = self.build_command(address, timeout)

        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.DEVNULL
            )
        except OSError as e:
            logger.debug(f"Не удалось запустить ping для {address}: {e}")
            return PingResult.ERROR

        try:
            returncode = await asyncio.wait_for(process.wait(), timeout=timeout + 1)
        except asyncio.TimeoutError:
            await self._kill(process)
            return PingResult.TIMEOUT

        if returncode == 0:
            return PingResult.SUCCESS
        return PingResult.UNREACHABLE

    async def probe(self, address: str, timeout: float) -> bool:
        """True если хост ответил в пределах таймаута"""
        return await self.check(address, timeout) == PingResult.SUCCESS

    @staticmethod
    async def _kill(process) -> None:
        try:
            process.kill()
        except ProcessLookupError:
            return
        await process.wait()


def ping_available() -> bool:
    """Проверка наличия команды ping в системе"""
    return shutil.which('ping') is not None
