"""
Вычисление диапазона хостов подсети
"""

from dataclasses import dataclass
from typing import Iterator

from .exceptions import InvalidPrefixError, RangeTooLargeError


def validate_prefix(prefix_length: int) -> int:
    """Проверка длины префикса IPv4"""
    if isinstance(prefix_length, bool) or not isinstance(prefix_length, int):
        raise InvalidPrefixError(prefix_length)
    if not 0 <= prefix_length <= 32:
        raise InvalidPrefixError(prefix_length)
    return prefix_length


def host_count(prefix_length: int) -> int:
    """
    Количество адресов для проверки в сети с данным префиксом

    Все значения, представимые хостовыми битами, минус один:
    (1 << (32 - prefix_length)) - 1. Для /32 получается 0.
    """
    validate_prefix(prefix_length)
    return (1 << (32 - prefix_length)) - 1


def generate(base_address: int, count: int) -> Iterator[int]:
    """
    Последовательность адресов base_address .. base_address + count - 1

    Генератор ленивый и однопроходный; повторный вызов с теми же
    аргументами дает ту же последовательность.
    """
    if count < 0:
        raise ValueError(f"count не может быть отрицательным: {count}")
    for offset in range(count):
        yield base_address + offset


def check_range_size(count: int, max_hosts: int) -> None:
    """Ограничение размера диапазона (защита от сканирования /0 и подобных)"""
    if count > max_hosts:
        raise RangeTooLargeError(count, max_hosts)


@dataclass(frozen=True)
class HostRange:
    """Диапазон хостов одной сети"""
    base_address: int
    host_count: int

    @classmethod
    def for_prefix(cls, base_address: int, prefix_length: int) -> "HostRange":
        return cls(base_address=base_address, host_count=host_count(prefix_length))

    def __iter__(self) -> Iterator[int]:
        return generate(self.base_address, self.host_count)

    def __len__(self) -> int:
        return self.host_count
