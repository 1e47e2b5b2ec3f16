"""
Вспомогательные утилиты
"""

import logging
import sys
from typing import Optional


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None):
    """
    Настройка логирования

    Args:
        log_level: Уровень логирования
        log_file: Файл для записи лога (опционально)
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    log_format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    date_format = '%Y-%m-%d %H:%M:%S'

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)

    formatter = logging.Formatter(log_format, date_format)

    # Лог в stderr, stdout занят результатами
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        root_logger.addHandler(file_handler)

    # Отключаем логирование для некоторых библиотек
    logging.getLogger('asyncio').setLevel(logging.WARNING)
