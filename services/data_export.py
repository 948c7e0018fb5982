# services/data_export.py

import csv
import io
import json

from core import analytics
from core.models import MonthRecord
from core.month_calendar import weekday_of

def export_month_json(record: MonthRecord) -> bytes:
    """Запись месяца в формате хранилища"""
    return json.dumps(record.to_dict(), ensure_ascii=False, indent=2).encode("utf-8")

def export_month_csv(record: MonthRecord, year: int, month: int) -> bytes:
    """Одна строка на день: отметки привычек (0/1), итоги дня, настроение и мотивация"""
    total_days = len(record.mental_state)
    habits = record.habits

    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerow(
        ["day", "weekday"]
        + [h.name for h in habits]
        + ["done", "percent", "mood", "motivation"]
    )

    for day_index in range(total_days):
        stats = analytics.daily_stats(habits, day_index)
        entry = record.mental_entry(day_index + 1)
        writer.writerow(
            [day_index + 1, weekday_of(year, month, day_index)]
            + [int(h.is_checked(day_index)) for h in habits]
            + [stats["done"], stats["percent"], entry.mood if entry else 0, entry.motivation if entry else 0]
        )

    return buffer.getvalue().encode("utf-8")
