#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
HabitGrid v1.0 - Mutation Operations
Чистые операции (MonthRecord, намерение) -> новая MonthRecord

Недопустимая цель операции (неизвестный id, день вне месяца)
ничего не меняет: функция возвращает ту же запись.

Версия: 1.0.0
Дата: 2026-10-17
"""

import re
import uuid
from dataclasses import dataclass, replace
from typing import Any, Optional, Union
import logging

from core.models import RATING_MAX, Habit, MonthRecord, clamp_rating, empty_checks

logger = logging.getLogger(__name__)

NEW_HABIT_NAME = "New Habit"
NEW_HABIT_ICON = "✨"

MOVE_UP = "up"
MOVE_DOWN = "down"

MENTAL_FIELDS = ("mood", "motivation")

_LEADING_INT = re.compile(r"^\s*([+-]?)0*(\d+)")

# ===== HELPERS =====

def parse_rating(raw_value: Any) -> int:
    """
    Разбор оценки настроения/мотивации

    Берётся ведущее целое число ("7abc" -> 7), пустой или
    нечитаемый ввод даёт 0, результат ограничен 0..10.
    """
    if raw_value is None or isinstance(raw_value, bool):
        return 0
    if isinstance(raw_value, (int, float)):
        try:
            return clamp_rating(int(raw_value))
        except (ValueError, OverflowError):
            return 0

    match = _LEADING_INT.match(str(raw_value))
    if not match:
        return 0

    sign, digits = match.groups()
    # Числа длиннее трёх цифр всё равно вне шкалы
    value = int(digits) if len(digits) <= 3 else RATING_MAX + 1
    return clamp_rating(-value if sign == "-" else value)

def new_habit_id(record: MonthRecord) -> str:
    """Новый id, не совпадающий ни с одним id записи"""
    existing = set(record.habit_ids)
    while True:
        candidate = uuid.uuid4().hex
        if candidate not in existing:
            return candidate

# ===== OPERATIONS =====

def toggle_check(record: MonthRecord, habit_id: str, day_index: int) -> MonthRecord:
    """Переключить ровно одну отметку"""
    index = record.habit_index(habit_id)
    if index < 0:
        logger.debug(f"toggle_check: неизвестная привычка {habit_id}")
        return record

    habit = record.habits[index]
    if not 0 <= day_index < len(habit.checks):
        logger.debug(f"toggle_check: день {day_index} вне месяца")
        return record

    checks = list(habit.checks)
    checks[day_index] = not checks[day_index]

    habits = list(record.habits)
    habits[index] = habit.with_checks(checks)
    return record.with_habits(habits)

def rename_habit(record: MonthRecord, habit_id: str, new_name: str, new_icon: str) -> MonthRecord:
    """Изменить название и иконку; цель и отметки не трогаются"""
    index = record.habit_index(habit_id)
    if index < 0:
        logger.debug(f"rename_habit: неизвестная привычка {habit_id}")
        return record

    habits = list(record.habits)
    habits[index] = replace(habits[index], name=new_name, icon=new_icon)
    return record.with_habits(habits)

def add_habit(record: MonthRecord, total_days: int, habit_id: Optional[str] = None) -> MonthRecord:
    """Добавить привычку-заготовку в конец списка"""
    if habit_id is None or habit_id in record.habit_ids:
        habit_id = new_habit_id(record)

    habit = Habit(
        id=habit_id,
        name=NEW_HABIT_NAME,
        icon=NEW_HABIT_ICON,
        goal=total_days,
        checks=empty_checks(total_days),
    )
    return record.with_habits(record.habits + (habit,))

def delete_habit(record: MonthRecord, habit_id: str) -> MonthRecord:
    """Удалить привычку только из этой записи; другие месяцы не затрагиваются"""
    if record.habit_index(habit_id) < 0:
        logger.debug(f"delete_habit: неизвестная привычка {habit_id}")
        return record
    return record.with_habits(h for h in record.habits if h.id != habit_id)

def move_habit(record: MonthRecord, index: int, direction: str) -> MonthRecord:
    """Поменять привычку местами с соседом; на границах ничего не происходит"""
    if direction == MOVE_UP:
        target = index - 1
    elif direction == MOVE_DOWN:
        target = index + 1
    else:
        logger.debug(f"move_habit: неизвестное направление {direction!r}")
        return record

    count = len(record.habits)
    if not (0 <= index < count and 0 <= target < count):
        return record

    habits = list(record.habits)
    habits[index], habits[target] = habits[target], habits[index]
    return record.with_habits(habits)

def set_mental_value(record: MonthRecord, day_index: int, field: str, raw_value: Any) -> MonthRecord:
    """Записать настроение или мотивацию для дня day_index + 1"""
    if field not in MENTAL_FIELDS:
        logger.debug(f"set_mental_value: неизвестное поле {field!r}")
        return record

    day = day_index + 1
    position = next(
        (i for i, entry in enumerate(record.mental_state) if entry.day == day),
        -1,
    )
    if position < 0:
        logger.debug(f"set_mental_value: день {day} вне месяца")
        return record

    entries = list(record.mental_state)
    entries[position] = replace(entries[position], **{field: parse_rating(raw_value)})
    return record.with_mental_state(entries)

# ===== INTENTS =====

@dataclass(frozen=True)
class ToggleCheck:
    habit_id: str
    day_index: int

@dataclass(frozen=True)
class RenameHabit:
    habit_id: str
    name: str
    icon: str

@dataclass(frozen=True)
class AddHabit:
    habit_id: Optional[str] = None

@dataclass(frozen=True)
class DeleteHabit:
    habit_id: str

@dataclass(frozen=True)
class MoveHabit:
    index: int
    direction: str

@dataclass(frozen=True)
class SetMentalValue:
    day_index: int
    field: str
    value: Any

Intent = Union[ToggleCheck, RenameHabit, AddHabit, DeleteHabit, MoveHabit, SetMentalValue]

def apply_intent(record: MonthRecord, intent: Intent, total_days: int) -> MonthRecord:
    """Применить намерение пользователя к записи"""
    if isinstance(intent, ToggleCheck):
        return toggle_check(record, intent.habit_id, intent.day_index)
    if isinstance(intent, RenameHabit):
        return rename_habit(record, intent.habit_id, intent.name, intent.icon)
    if isinstance(intent, AddHabit):
        return add_habit(record, total_days, intent.habit_id)
    if isinstance(intent, DeleteHabit):
        return delete_habit(record, intent.habit_id)
    if isinstance(intent, MoveHabit):
        return move_habit(record, intent.index, intent.direction)
    if isinstance(intent, SetMentalValue):
        return set_mental_value(record, intent.day_index, intent.field, intent.value)
    raise TypeError(f"Неизвестное намерение: {intent!r}")
