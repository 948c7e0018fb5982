#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
HabitGrid v1.0 - Calendar Geometry
Длина месяца, дни недели и разбиение месяца на недели

Версия: 1.0.0
Дата: 2026-10-17
"""

import calendar
from typing import Dict, List, Any

# Порядок начинается с воскресенья
DAYS_OF_WEEK = ['Su', 'Mo', 'Tu', 'We', 'Th', 'Fr', 'Sa']

# Первые три недели фиксированы, четвёртая забирает остаток
FIXED_WEEKS = 3
DAYS_PER_WEEK = 7

def days_in_month(year: int, month: int) -> int:
    """Количество дней в месяце (month с нуля)"""
    return calendar.monthrange(year, month + 1)[1]

def weekday_of(year: int, month: int, day_index: int) -> str:
    """Подпись дня недели для day_index (0 = первое число)"""
    # calendar.weekday: понедельник = 0, сдвигаем к воскресенью
    weekday = calendar.weekday(year, month + 1, day_index + 1)
    return DAYS_OF_WEEK[(weekday + 1) % 7]

def group_into_weeks(total_days: int) -> List[Dict[str, Any]]:
    """
    Разбиение дней месяца на недели

    Это не ISO-недели: первые три блока по 7 дней,
    последний блок получает всё, что осталось (7-10 дней).
    """
    weeks = []
    current_day = 0
    week_number = 1

    while current_day < total_days:
        if week_number > FIXED_WEEKS:
            days = list(range(current_day, total_days))
        else:
            days = list(range(current_day, min(current_day + DAYS_PER_WEEK, total_days)))

        weeks.append({"label": f"Week {week_number}", "days": days})
        current_day += len(days)
        week_number += 1

    return weeks

def day_configs(year: int, month: int) -> List[Dict[str, Any]]:
    """Номер и подпись для каждого дня месяца"""
    return [
        {"dayNum": index + 1, "dayName": weekday_of(year, month, index)}
        for index in range(days_in_month(year, month))
    ]

def month_name(month: int) -> str:
    return calendar.month_name[month + 1]
