#!/usr/bin/env python3
"""
Вывод месяца трекера в терминал
Использование: python -m scripts.show_month [--year YEAR --month MONTH] [--offset N]

Месяц указывается с единицы (1 = январь), как его вводит человек.
"""

import sys
import argparse
import logging

from config import get_config
from core.database import MonthRecordStore
from core.storage import JsonFileStore, StorageError
from services.tracker_service import HabitTrackerService
from ui.progress import check_cell, progress_bar, rating_cell, week_header
from utils.logger import setup_logger

logger = logging.getLogger(__name__)

def render_month(view: dict) -> str:
    """Текстовое представление месяца"""
    summary = view["summary"]
    lines = [
        f"📅 {view['monthName']} {view['year']}",
        f"Привычек: {summary['totalHabits']}  Выполнено: {summary['totalActual']}/{summary['totalPossible']}",
        progress_bar(summary["percent"], length=20),
        "",
    ]

    header = week_header(view["weeks"], view["days"])
    lines.append(f"{'':<28}" + header[0])
    lines.append(f"{'':<28}" + header[1])

    for habit in view["habits"]:
        cells = " | ".join(
            " ".join(f"{check_cell(habit['checks'][i]):>2}" for i in week["days"])
            for week in view["weeks"]
        )
        title = f"{habit['icon']} {habit['name']}"[:26]
        lines.append(f"{title:<28}{cells}")

    percent_row = " | ".join(
        " ".join(f"{view['dailyStats'][i]['percent']:>2}" for i in week["days"])
        for week in view["weeks"]
    )
    lines.append(f"{'Progress %':<28}{percent_row}")

    for field, label in (("mood", "Mood"), ("motivation", "Motivation")):
        row = " | ".join(
            " ".join(rating_cell(view["mentalState"][i][field]) for i in week["days"])
            for week in view["weeks"]
        )
        lines.append(f"{label:<28}{row}")

    lines.append("")
    lines.append("Анализ:")
    for row in view["analysis"]:
        lines.append(f"  {row['icon']} {row['name']:<24} {row['actual']:>2}/{row['goal']:<3} {progress_bar(row['percent'])}")

    return "\n".join(lines)

def main():
    parser = argparse.ArgumentParser(description='Показать месяц трекера привычек')
    parser.add_argument('--year', type=int, help='Год')
    parser.add_argument('--month', type=int, choices=range(1, 13), metavar='1-12', help='Месяц (1-12)')
    parser.add_argument('--offset', type=int, default=0, help='Сдвиг от выбранного месяца')
    args = parser.parse_args()
    if (args.year is None) != (args.month is None):
        parser.error('--year и --month указываются вместе')

    config = get_config()
    config.ensure_directories()
    setup_logger(log_file=None, level="WARNING")

    try:
        service = HabitTrackerService(
            MonthRecordStore(JsonFileStore(config.storage.data_file)),
            timezone_name=config.timezone_name,
        )
        if args.year is not None and args.month is not None:
            service.open_month(args.year, args.month - 1)
        else:
            service.open_current_month()
        if args.offset:
            service.change_month(args.offset)
    except StorageError as e:
        logger.error(f"❌ Ошибка хранилища: {e}")
        sys.exit(1)

    print(render_month(service.get_month_view()))

if __name__ == "__main__":
    main()
