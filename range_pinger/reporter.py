"""
Модуль для генерации отчетов
"""

import csv
import io
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import AdapterInfo, ScannerConfig, ReportFormat, ScanResult

logger = logging.getLogger(__name__)


class ReportGenerator:
    """Генератор отчетов"""

    def __init__(self, config: ScannerConfig):
        self.config = config

    @staticmethod
    def format_adapters(adapters: List[AdapterInfo]) -> str:
        """Нумерованный список адаптеров: 1. eth0 (192.168.1.10/24)"""
        return "\n".join(
            f"{i}. {adapter.name} ({adapter.display_address}/{adapter.prefix_length})"
            for i, adapter in enumerate(adapters, start=1)
        )

    def generate(self, result: ScanResult) -> str:
        """
        Генерация отчета

        Args:
            result: Результат сканирования

        Returns:
            Строка с отчетом
        """
        format_methods = {
            ReportFormat.TEXT: self._generate_text,
            ReportFormat.JSON: self._generate_json,
            ReportFormat.CSV: self._generate_csv,
        }

        method = format_methods.get(self.config.report_format, self._generate_text)
        return method(result)

    def _generate_text(self, result: ScanResult) -> str:
        """Генерация текстового отчета"""
        report_lines = [
            f"Адаптер: {result.adapter_name}",
            f"Проверено адресов: {result.hosts_scanned}, "
            f"доступно: {result.alive_count}, "
            f"время: {result.scan_duration:.1f} сек",
            "-" * 50,
        ]
        report_lines.extend(result.addresses)
        return "\n".join(report_lines)

    def _generate_json(self, result: ScanResult) -> str:
        """Генерация JSON отчета"""
        full_report = {
            "metadata": {
                "generated_at": datetime.now().isoformat(),
                "timeout": self.config.timeout,
                "scanner_version": __version__
            },
            "scan_results": result.to_dict()
        }

        return json.dumps(full_report, indent=2, ensure_ascii=False)

    def _generate_csv(self, result: ScanResult) -> str:
        """Генерация CSV отчета"""
        output = io.StringIO()
        writer = csv.writer(output)

        writer.writerow(["IP Address", "Adapter", "Timestamp"])

        timestamp = datetime.now().isoformat()
        for address in result.addresses:
            writer.writerow([address, result.adapter_name, timestamp])

        return output.getvalue()

    def save_report(self, report: str, filepath: Optional[str] = None) -> bool:
        """
        Сохранение отчета в файл

        Args:
            report: Текст отчета
            filepath: Путь к файлу (по умолчанию config.output_file)

        Returns:
            True если отчет записан
        """
        filepath = filepath or self.config.output_file
        if not filepath:
            return False

        path = Path(filepath)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            f.write(report)

        logger.info(f"Отчет сохранен в файл: {filepath}")
        return True
