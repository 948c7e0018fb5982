#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
HabitGrid v1.0 - Aggregation Engine
Дневная и помесячная статистика по привычкам, данные для графиков

Все функции чистые и пересчитываются по запросу: привычек десятки,
дней не больше 31, кэш не нужен.

Версия: 1.0.0
Дата: 2026-10-17
"""

import math
from typing import Any, Dict, Iterable, List, Optional, Sequence

from core.models import Habit, MentalStateEntry

def round_half_up(value: float) -> int:
    """Округление как в интерфейсе: 12.5 -> 13"""
    return int(math.floor(value + 0.5))

# ===== ПО ДНЯМ =====

def daily_stats(habits: Sequence[Habit], day: int) -> Dict[str, int]:
    """Сколько привычек выполнено в день day (индекс с нуля)"""
    total = len(habits)
    done = sum(1 for h in habits if h.is_checked(day))
    percent = round_half_up(done / total * 100) if total > 0 else 0

    return {
        "day": day + 1,
        "done": done,
        "notDone": total - done,
        "percent": percent,
    }

def daily_stats_series(habits: Sequence[Habit], total_days: int) -> List[Dict[str, int]]:
    return [daily_stats(habits, day) for day in range(total_days)]

# ===== ПО ПРИВЫЧКАМ =====

def habit_total(habit: Habit) -> int:
    return habit.total

def habit_progress_percent(habit: Habit, goal: Optional[int] = None) -> float:
    """
    Прогресс привычки относительно цели

    По умолчанию используется сохранённая цель привычки. Результат
    не ограничен сверху: перевыполнение даёт больше 100.
    """
    if goal is None:
        goal = habit.goal
    if goal <= 0:
        return 0.0
    return habit_total(habit) / goal * 100

def habit_analysis(habits: Iterable[Habit]) -> List[Dict[str, Any]]:
    """Строки блока анализа: цель, факт и процент для каждой привычки"""
    return [
        {
            "id": h.id,
            "name": h.name,
            "icon": h.icon,
            "goal": h.goal,
            "actual": habit_total(h),
            "percent": round(habit_progress_percent(h), 2),
        }
        for h in habits
    ]

# ===== ИТОГИ МЕСЯЦА =====

def summary(habits: Sequence[Habit], total_days: int) -> Dict[str, Any]:
    """Общее количество возможных и фактических отметок за месяц"""
    total_possible = len(habits) * total_days
    total_actual = sum(habit_total(h) for h in habits)
    percent = total_actual / total_possible * 100 if total_possible > 0 else 0.0

    return {
        "totalHabits": len(habits),
        "totalPossible": total_possible,
        "totalActual": total_actual,
        "percent": round(percent, 2),
    }

# ===== ГРАФИКИ =====

def habit_chart_series(habits: Sequence[Habit], total_days: int) -> List[Dict[str, int]]:
    """Процент выполнения по дням для графика прогресса"""
    return [
        {"day": stat["day"], "value": stat["percent"]}
        for stat in daily_stats_series(habits, total_days)
    ]

def mental_state_series(entries: Iterable[MentalStateEntry]) -> List[Dict[str, int]]:
    return [entry.to_dict() for entry in entries]
