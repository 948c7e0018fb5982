#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
HabitGrid v1.0 - Month Key Codec
Ключи хранилища для месячных записей и навигация по месяцам

Месяцы во всём проекте нумеруются с нуля (0 = январь, 11 = декабрь).

Версия: 1.0.0
Дата: 2026-10-17
"""

import re
from typing import Optional, Tuple

STORAGE_KEY_PREFIX = "habit-tracker-data"

_KEY_PATTERN = re.compile(r"^" + re.escape(STORAGE_KEY_PREFIX) + r"-(-?\d+)-(\d{1,2})$")

def key_for(year: int, month: int) -> str:
    """Ключ хранилища для пары (год, месяц)"""
    return f"{STORAGE_KEY_PREFIX}-{year}-{month}"

def parse_key(key: str) -> Optional[Tuple[int, int]]:
    """Обратное преобразование ключа; None для посторонних ключей"""
    match = _KEY_PATTERN.match(key)
    if not match:
        return None
    year, month = int(match.group(1)), int(match.group(2))
    if not 0 <= month <= 11:
        return None
    return year, month

def shift_month(year: int, month: int, offset: int) -> Tuple[int, int]:
    """Сдвиг на offset месяцев с переносом года в обе стороны"""
    years, new_month = divmod(month + offset, 12)
    return year + years, new_month

def previous_month(year: int, month: int) -> Tuple[int, int]:
    return shift_month(year, month, -1)
