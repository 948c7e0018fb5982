#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
HabitGrid v1.0 - Carry-Over Resolver
Начальный набор привычек для месяца, у которого ещё нет записи

Версия: 1.0.0
Дата: 2026-10-17
"""

from typing import Any, Dict, List, Tuple
import logging

from core.database import MonthRecordStore
from core.models import Habit, MonthRecord, empty_checks, empty_mental_state
from core.month_calendar import days_in_month
from core.month_key import previous_month

logger = logging.getLogger(__name__)

# Шаблон для нового пользователя без истории
DEFAULT_HABITS_TEMPLATE: List[Dict[str, Any]] = [
    {"id": "1", "name": "Wake up at 05:00", "icon": "⏰", "goal": 30},
    {"id": "2", "name": "Gym", "icon": "💪", "goal": 30},
    {"id": "3", "name": "Reading / Learning", "icon": "📖", "goal": 30},
    {"id": "4", "name": "Day Planning", "icon": "📝", "goal": 30},
    {"id": "5", "name": "Budget Tracking", "icon": "💰", "goal": 30},
    {"id": "6", "name": "Project Work", "icon": "🚀", "goal": 30},
    {"id": "7", "name": "No Alcohol", "icon": "🍷", "goal": 30},
    {"id": "8", "name": "Social Media Detox", "icon": "🌿", "goal": 30},
    {"id": "9", "name": "Goal Journaling", "icon": "📔", "goal": 30},
    {"id": "10", "name": "Cold Shower", "icon": "🚿", "goal": 30},
]

def template_habits(total_days: int) -> Tuple[Habit, ...]:
    """Привычки из шаблона по умолчанию без отметок"""
    return tuple(
        Habit(checks=empty_checks(total_days), **item)
        for item in DEFAULT_HABITS_TEMPLATE
    )

def carried_habits(previous: MonthRecord, total_days: int) -> Tuple[Habit, ...]:
    """Копия привычек прошлого месяца со сброшенными отметками, порядок сохраняется"""
    return tuple(h.with_checks(empty_checks(total_days)) for h in previous.habits)

def resolve_month(records: MonthRecordStore, year: int, month: int, now_ms: int = 0) -> MonthRecord:
    """
    Построить запись для месяца без сохранённых данных

    Привычки берутся из записи предыдущего месяца, а если её нет,
    из шаблона. Настроение и мотивация всегда начинаются с нуля.
    """
    total_days = days_in_month(year, month)
    prev_year, prev_month = previous_month(year, month)
    previous = records.load(prev_year, prev_month)

    if previous is not None:
        habits = carried_habits(previous, total_days)
        logger.info(f"📋 {year}-{month + 1:02d}: перенесено привычек из прошлого месяца: {len(habits)}")
    else:
        habits = template_habits(total_days)
        logger.info(f"✨ {year}-{month + 1:02d}: истории нет, используем шаблон по умолчанию")

    return MonthRecord(
        habits=habits,
        mental_state=empty_mental_state(total_days),
        last_updated=now_ms,
    )

def load_or_resolve(records: MonthRecordStore, year: int, month: int, now_ms: int = 0) -> Tuple[MonthRecord, bool]:
    """Запись месяца и флаг, что она создана заново (её нужно сохранить)"""
    record = records.load(year, month)
    if record is not None:
        return record, False
    return resolve_month(records, year, month, now_ms), True
