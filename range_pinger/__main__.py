"""
Запуск: python -m range_pinger
"""

from .main import run

run()
