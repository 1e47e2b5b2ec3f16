"""
Исключения сканера диапазона адресов
"""

from typing import Optional, Dict, Any


class RangePingerError(Exception):
    """Базовое исключение сканера"""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if not self.context:
            return self.message
        context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} ({context_str})"


class ConfigurationError(RangePingerError):
    """Некорректные параметры сканирования. Сканирование не выполняется."""


class InvalidPrefixError(ConfigurationError):
    """Длина префикса вне диапазона [0, 32]"""

    def __init__(self, prefix_length: Any):
        super().__init__(
            f"Некорректная длина префикса: /{prefix_length}. Допустимый диапазон: 0-32",
            {"prefix_length": prefix_length}
        )
        self.prefix_length = prefix_length


class InvalidAdapterError(ConfigurationError):
    """Адаптер с некорректными параметрами сети"""

    def __init__(self, adapter_name: str, prefix_length: Any, reason: Optional[str] = None):
        super().__init__(
            f"Адаптер '{adapter_name}': "
            f"{reason or f'некорректная длина префикса /{prefix_length}'}",
            {"adapter": adapter_name, "prefix_length": prefix_length}
        )
        self.adapter_name = adapter_name
        self.prefix_length = prefix_length


class RangeTooLargeError(ConfigurationError):
    """Диапазон превышает допустимое количество хостов"""

    def __init__(self, host_count: int, max_hosts: int):
        super().__init__(
            f"Диапазон слишком большой: {host_count} адресов (максимум {max_hosts})",
            {"host_count": host_count, "max_hosts": max_hosts}
        )
        self.host_count = host_count
        self.max_hosts = max_hosts


class AddressFormatError(ConfigurationError):
    """Некорректное представление IPv4 адреса"""


class AdapterNotFoundError(RangePingerError):
    """Сетевой адаптер не найден"""
