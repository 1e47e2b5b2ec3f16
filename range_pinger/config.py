"""
Модуль конфигурации и моделей данных
"""

import copy
import json
import logging
from dataclasses import dataclass, field, asdict
from enum import Enum
from pathlib import Path
from typing import Dict, Any, Optional, List, Iterator

import yaml

logger = logging.getLogger(__name__)


class ReportFormat(Enum):
    """Формат отчета"""
    TEXT = "text"
    JSON = "json"
    CSV = "csv"


class PingResult(Enum):
    """Результат проверки ping"""
    SUCCESS = "success"
    TIMEOUT = "timeout"
    UNREACHABLE = "unreachable"
    ERROR = "error"


@dataclass(frozen=True)
class AdapterInfo:
    """Сетевой адаптер с IPv4 адресом"""
    name: str
    display_address: str
    prefix_length: int
    address_value: int


@dataclass(frozen=True)
class ProbeOutcome:
    """Результат проверки одного адреса"""
    address: int
    reachable: bool


@dataclass
class ScanResult:
    """Результат сканирования диапазона адаптера"""
    addresses: List[str] = field(default_factory=list)
    adapter_name: str = ""
    hosts_scanned: int = 0
    scan_duration: float = 0.0

    @property
    def alive_count(self) -> int:
        return len(self.addresses)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "adapter": self.adapter_name,
            "hosts_scanned": self.hosts_scanned,
            "alive": self.alive_count,
            "scan_duration_seconds": round(self.scan_duration, 2),
            "addresses": list(self.addresses),
        }

    def __iter__(self) -> Iterator[str]:
        return iter(self.addresses)

    def __len__(self) -> int:
        return len(self.addresses)


@dataclass
class ScannerConfig:
    """Конфигурация сканера с валидацией"""

    # Таймаут одного ping, секунды
    timeout: float = 5.0

    # Максимальный размер диапазона (65535 соответствует /16)
    max_hosts: int = 65535

    # Настройки вывода
    report_format: ReportFormat = ReportFormat.TEXT
    output_file: Optional[str] = None

    # Логирование
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def __post_init__(self):
        """Валидация значений после инициализации"""
        self._validate_values()

    def _validate_values(self):
        """Проверка корректности значений"""
        if self.timeout <= 0:
            raise ValueError("timeout должен быть положительным числом")
        if self.max_hosts < 0:
            raise ValueError("max_hosts не может быть отрицательным")

        valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if self.log_level.upper() not in valid_log_levels:
            raise ValueError(f"log_level должен быть одним из: {valid_log_levels}")

    def to_dict(self) -> Dict[str, Any]:
        """Преобразование в словарь"""
        data = asdict(self)
        data["report_format"] = self.report_format.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScannerConfig":
        """Создание из словаря"""
        data = dict(data)
        # Преобразуем строковый формат в Enum
        if "report_format" in data and isinstance(data["report_format"], str):
            try:
                data["report_format"] = ReportFormat(data["report_format"].lower())
            except ValueError:
                logger.warning(f"Неизвестный формат отчета '{data['report_format']}', используется text")
                data["report_format"] = ReportFormat.TEXT

        known = set(cls.__dataclass_fields__)
        unknown = set(data) - known
        if unknown:
            logger.warning(f"Неизвестные параметры конфигурации пропущены: {sorted(unknown)}")

        return cls(**{k: v for k, v in data.items() if k in known})


class ConfigLoader:
    """Загрузчик конфигурации"""

    CONFIG_FILES = [
        "range_pinger.yaml",
        "config/range_pinger.yaml",
        "range_pinger.json",
    ]

    DEFAULT_CONFIG = {
        "timeout": 5.0,
        "max_hosts": 65535,
        "report_format": "text",
        "output_file": None,
        "log_level": "INFO",
        "log_file": None,
    }

    @classmethod
    def load(cls, config_path: Optional[str] = None,
             overrides: Optional[Dict[str, Any]] = None) -> ScannerConfig:
        """
        Загрузка конфигурации

        Args:
            config_path: Путь к файлу конфигурации (опционально)
            overrides: Значения, переопределяющие файл (например, из командной строки)

        Returns:
            Объект конфигурации
        """
        config_dict = copy.deepcopy(cls.DEFAULT_CONFIG)

        found_config = cls._find_config_file(config_path)

        if found_config:
            try:
                user_config = cls._load_config_file(found_config)
                config_dict = cls._deep_merge(config_dict, user_config)
                logger.info(f"Загружена конфигурация из {found_config}")
            except (OSError, ValueError, yaml.YAMLError) as e:
                logger.warning(f"Ошибка загрузки конфигурации: {e}")
                logger.info("Используются значения по умолчанию")
        elif config_path:
            logger.warning(f"Файл конфигурации {config_path} не найден, используются значения по умолчанию")
        else:
            logger.debug("Конфигурационный файл не найден, используются значения по умолчанию")

        if overrides:
            config_dict.update({k: v for k, v in overrides.items() if v is not None})

        return ScannerConfig.from_dict(config_dict)

    @classmethod
    def _find_config_file(cls, config_path: Optional[str] = None) -> Optional[Path]:
        """Поиск файла конфигурации"""
        if config_path:
            path = Path(config_path)
            if path.exists():
                return path
            return None

        for config_file in cls.CONFIG_FILES:
            path = Path(config_file)
            if path.exists():
                return path

        return None

    @staticmethod
    def _load_config_file(filepath: Path) -> Dict[str, Any]:
        """Загрузка конфигурации из YAML или JSON файла"""
        with open(filepath, 'r', encoding='utf-8') as f:
            if filepath.suffix.lower() == '.json':
                data = json.load(f)
            else:
                data = yaml.safe_load(f)

        data = data or {}
        if not isinstance(data, dict):
            raise ValueError(f"Файл {filepath} должен содержать словарь параметров")
        return data

    @classmethod
    def _deep_merge(cls, base: Dict[str, Any], update: Dict[str, Any]) -> Dict[str, Any]:
        """Рекурсивное объединение словарей"""
        result = dict(base)
        for key, value in update.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = cls._deep_merge(result[key], value)
            else:
                result[key] = value
        return result
