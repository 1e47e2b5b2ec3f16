"""
Преобразование IPv4 адресов между байтовым, строковым и целочисленным видом
"""

from typing import Union

from .exceptions import AddressFormatError

FULL_MASK = 0xFFFFFFFF

# Сдвиги октетов от старшего к младшему (big-endian)
_SHIFTS = (24, 16, 8, 0)


def network_mask(prefix_length: int) -> int:
    """Маска сети для префикса в виде 32-битного числа"""
    if prefix_length <= 0:
        return 0
    return (FULL_MASK << (32 - prefix_length)) & FULL_MASK


class AddressCodec:
    """Кодек IPv4 адресов"""

    @staticmethod
    def encode(address_bytes: Union[bytes, bytearray, list, tuple],
               prefix_length: int = 24) -> int:
        """
        Упаковка четырех октетов в 32-битное число (big-endian)

        Хостовая часть адреса всегда нормализуется к 1, то есть результат
        указывает на первый хост сети. По умолчанию хостовой частью
        считается младший октет: старшие три октета сохраняются,
        младший становится равен 1.

        Args:
            address_bytes: Четыре октета адреса
            prefix_length: Длина префикса, определяющая хостовую часть

        Returns:
            Адрес первого хоста в виде числа
        """
        octets = bytes(address_bytes)
        if len(octets) != 4:
            raise AddressFormatError(
                f"Ожидалось 4 октета IPv4 адреса, получено {len(octets)}",
                {"value": list(octets)}
            )

        value = (octets[0] << 24) | (octets[1] << 16) | (octets[2] << 8) | octets[3]

        # У /32 нет хостовой части
        if prefix_length >= 32:
            return value

        return (value & network_mask(prefix_length)) | 1

    @staticmethod
    def decode(value: int) -> bytes:
        """Разбиение 32-битного числа на четыре октета (big-endian)"""
        return bytes((value >> shift) & 0xFF for shift in _SHIFTS)

    @staticmethod
    def to_text(value: int) -> str:
        """Число в строку вида 192.168.1.1"""
        return ".".join(str(octet) for octet in AddressCodec.decode(value))
