"""
Поиск доступных хостов в подсети сетевого адаптера
"""

__version__ = "1.0.0"

from .address import AddressCodec
from .config import (
    AdapterInfo, ConfigLoader, ProbeOutcome, ReportFormat, ScannerConfig, ScanResult
)
from .coordinator import ScanCoordinator
from .exceptions import (
    RangePingerError, ConfigurationError, InvalidPrefixError, InvalidAdapterError,
    RangeTooLargeError, AddressFormatError, AdapterNotFoundError
)
from .host_range import HostRange, generate, host_count
from .prober import ConcurrentProber
from .probe import PingProbe
from .adapters import AdapterDirectory
from .reporter import ReportGenerator

__all__ = [
    'AddressCodec',
    'AdapterInfo',
    'ConfigLoader',
    'ProbeOutcome',
    'ReportFormat',
    'ScannerConfig',
    'ScanResult',
    'ScanCoordinator',
    'RangePingerError',
    'ConfigurationError',
    'InvalidPrefixError',
    'InvalidAdapterError',
    'RangeTooLargeError',
    'AddressFormatError',
    'AdapterNotFoundError',
    'HostRange',
    'generate',
    'host_count',
    'ConcurrentProber',
    'PingProbe',
    'AdapterDirectory',
    'ReportGenerator',
]
