"""
Точка входа сканера диапазона адресов
"""

import argparse
import logging
import sys
from typing import List, Optional

from .adapters import AdapterDirectory
from .config import ConfigLoader, ScannerConfig, AdapterInfo, ReportFormat
from .coordinator import ScanCoordinator
from .exceptions import RangePingerError
from .probe import ping_available
from .reporter import ReportGenerator
from .utils import setup_logging

EXIT_NORMAL = 0
EXIT_INCORRECT_PARAM = 1

logger = logging.getLogger(__name__)


class ArgumentParser(argparse.ArgumentParser):
    """Ошибки в аргументах завершают программу с кодом EXIT_INCORRECT_PARAM"""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(EXIT_INCORRECT_PARAM, f"{self.prog}: ошибка: {message}\n")


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Парсинг аргументов командной строки"""
    parser = ArgumentParser(
        prog='range-pinger',
        description='Поиск доступных хостов в подсети сетевого адаптера',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры использования:
  range-pinger -l
  range-pinger -a 2
  range-pinger -a 192.168.1 -f json -o report.json
  range-pinger (запуск в интерактивном режиме)
        """
    )

    action = parser.add_mutually_exclusive_group()
    action.add_argument(
        '-l', '--list',
        action='store_true',
        help='Показать доступные сетевые адаптеры'
    )
    action.add_argument(
        '-a', '--adapter',
        metavar='NUM_OR_IP',
        help='Сканировать диапазон адаптера с номером NUM в списке или с адресом IP'
    )

    parser.add_argument(
        '-c', '--config',
        help='Файл конфигурации (YAML/JSON)'
    )
    parser.add_argument(
        '-t', '--timeout',
        type=float,
        help='Таймаут ping в секундах (по умолчанию: 5)'
    )
    parser.add_argument(
        '-f', '--format',
        choices=[fmt.value for fmt in ReportFormat],
        help='Формат отчета (по умолчанию: text)'
    )
    parser.add_argument(
        '-o', '--output',
        help='Сохранить отчет в файл'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Подробный вывод (DEBUG уровень)'
    )

    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> ScannerConfig:
    """Конфигурация из файла с учетом параметров командной строки"""
    overrides = {
        "timeout": args.timeout,
        "report_format": args.format,
        "output_file": args.output,
        "log_level": "DEBUG" if args.verbose else None,
    }
    return ConfigLoader.load(args.config, overrides)


def list_adapters(directory: AdapterDirectory) -> int:
    """Вывод списка адаптеров"""
    adapters = directory.get_adapters()
    if adapters:
        print(ReportGenerator.format_adapters(adapters))
    else:
        print("Нет доступных сетевых адаптеров!")
    return EXIT_NORMAL


def scan_and_report(adapter: AdapterInfo, config: ScannerConfig,
                    coordinator: Optional[ScanCoordinator] = None) -> int:
    """Сканирование диапазона адаптера и вывод результата"""
    coordinator = coordinator or ScanCoordinator(config)
    result = coordinator.run_scan(adapter)

    reporter = ReportGenerator(config)
    report = reporter.generate(result)
    if config.output_file:
        reporter.save_report(report)
    else:
        print(report)
    return EXIT_NORMAL


def parse_number(text: str) -> Optional[int]:
    """Целое число из строки или None"""
    try:
        return int(text)
    except ValueError:
        return None


def select_adapter(directory: AdapterDirectory, selector: str) -> AdapterInfo:
    """Выбор адаптера по номеру или по началу адреса"""
    number = parse_number(selector)
    if number is not None:
        return directory.find_by_number(number)
    return directory.find_by_ip(selector)


def interactive_select(directory: AdapterDirectory) -> Optional[AdapterInfo]:
    """Интерактивный выбор адаптера"""
    adapters = directory.get_adapters()
    if not adapters:
        print("Нет доступных сетевых адаптеров!")
        return None

    print("Доступные сетевые адаптеры:")
    print(ReportGenerator.format_adapters(adapters))

    try:
        choice = input("Выберите адаптер для сканирования: ")
    except EOFError:
        choice = ""

    number = parse_number(choice)
    if number is None:
        print("Некорректный ввод!")
        return None

    index = number - 1
    if not 0 <= index < len(adapters):
        print("Некорректный номер адаптера!")
        return None

    adapter = adapters[index]
    print(f"\nВыбран: {adapter.name}")
    return adapter


def main(argv: Optional[List[str]] = None,
         directory: Optional[AdapterDirectory] = None) -> int:
    """Основная функция"""
    args = parse_arguments(argv)

    try:
        config = load_config(args)
    except ValueError as e:
        print(f"Ошибка конфигурации: {e}", file=sys.stderr)
        return EXIT_INCORRECT_PARAM

    setup_logging(config.log_level, config.log_file)
    directory = directory or AdapterDirectory()

    try:
        if args.list:
            return list_adapters(directory)

        if args.adapter is not None:
            adapter = select_adapter(directory, args.adapter)
        else:
            adapter = interactive_select(directory)
            if adapter is None:
                return EXIT_INCORRECT_PARAM

        if not ping_available():
            logger.warning("Команда 'ping' не найдена, все хосты будут считаться недоступными")

        exit_code = scan_and_report(adapter, config)
        if args.adapter is None:
            print("Готово!")
        return exit_code

    except RangePingerError as e:
        print(f"Ошибка: {e}", file=sys.stderr)
        return EXIT_INCORRECT_PARAM
    except KeyboardInterrupt:
        print("\n\nСканирование прервано пользователем", file=sys.stderr)
        return EXIT_NORMAL


def run():
    """Точка входа консольного скрипта"""
    sys.exit(main())


if __name__ == "__main__":
    run()
