# services/__init__.py

"""
Модуль сервисов HabitGrid

Сессия трекера (владелец записи открытого месяца) и экспорт данных.
"""

from .tracker_service import HabitTrackerService
from .data_export import export_month_csv, export_month_json

__all__ = [
    'HabitTrackerService',
    'export_month_csv',
    'export_month_json',
]
