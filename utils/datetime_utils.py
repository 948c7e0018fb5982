import time
from datetime import datetime
from typing import Tuple

import pytz

def now_local(tz_name: str = "UTC") -> datetime:
    return datetime.now(pytz.timezone(tz_name))

def now_ms() -> int:
    """Текущее время в миллисекундах эпохи (поле lastUpdated)"""
    return int(time.time() * 1000)

def current_year_month(tz_name: str = "UTC") -> Tuple[int, int]:
    """Год и месяц (с нуля) сегодняшнего дня в заданном поясе"""
    today = now_local(tz_name)
    return today.year, today.month - 1

def format_timestamp_ms(value: int, tz_name: str = "UTC", fmt: str = "%d.%m.%Y %H:%M") -> str:
    if not value:
        return ""
    return datetime.fromtimestamp(value / 1000, pytz.timezone(tz_name)).strftime(fmt)
