#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
HabitGrid v1.0 - Core Data Models
Неизменяемые модели месячной записи: привычки и ментальное состояние

Все модели заморожены: любое изменение создаёт новый объект,
последовательности хранятся в кортежах и не разделяются между версиями.

Версия: 1.0.0
Дата: 2026-10-17
"""

import json
import math
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, List, Optional, Tuple
import logging

logger = logging.getLogger(__name__)

# Границы шкалы настроения и мотивации (0 = нет записи)
RATING_MIN = 0
RATING_MAX = 10

# ===== EXCEPTIONS =====

class HabitGridError(Exception):
    """Базовое исключение проекта"""
    pass

class ValidationError(HabitGridError):
    """Ошибка валидации сохранённых данных"""
    pass

# ===== VALIDATION HELPERS =====

def _require(data: Dict[str, Any], key: str, owner: str) -> Any:
    if key not in data:
        raise ValidationError(f"{owner}: отсутствует поле '{key}'")
    return data[key]

def _as_int(value: Any, field_name: str) -> int:
    """Число из JSON в int; bool и строки не принимаются"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{field_name} должен быть числом, получено {value!r}")
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValidationError(f"{field_name} должен быть конечным числом")
        return int(value)
    return value

def _as_str(value: Any, field_name: str) -> str:
    if isinstance(value, str):
        return value
    # Старые записи могли хранить числовые id
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    raise ValidationError(f"{field_name} должен быть строкой, получено {value!r}")

def _as_list(value: Any, field_name: str) -> List[Any]:
    if not isinstance(value, list):
        raise ValidationError(f"{field_name} должен быть списком")
    return value

def clamp_rating(value: int) -> int:
    """Ограничение оценки диапазоном 0-10"""
    return max(RATING_MIN, min(RATING_MAX, value))

# ===== CORE MODELS =====

@dataclass(frozen=True)
class Habit:
    """Привычка с отметками по дням месяца (индекс 0 = первое число)"""
    id: str
    name: str
    icon: str
    goal: int
    checks: Tuple[bool, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "checks", tuple(bool(c) for c in self.checks))

    @property
    def total(self) -> int:
        """Количество выполненных дней"""
        return sum(1 for c in self.checks if c)

    def is_checked(self, day_index: int) -> bool:
        return 0 <= day_index < len(self.checks) and self.checks[day_index]

    def with_checks(self, checks: Iterable[bool]) -> "Habit":
        return replace(self, checks=tuple(checks))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "icon": self.icon,
            "goal": self.goal,
            "checks": list(self.checks),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], default_goal: int = 0) -> "Habit":
        """
        Разбор привычки из сохранённого словаря

        Обязательны id, name и checks. Отсутствующие icon и goal
        получают значения по умолчанию, длина checks не проверяется.
        """
        if not isinstance(data, dict):
            raise ValidationError("Привычка должна быть объектом")

        checks = _as_list(_require(data, "checks", "habit"), "checks")
        goal = data.get("goal")

        return cls(
            id=_as_str(_require(data, "id", "habit"), "id"),
            name=_as_str(_require(data, "name", "habit"), "name"),
            icon=_as_str(data.get("icon", ""), "icon"),
            goal=default_goal if goal is None else _as_int(goal, "goal"),
            checks=tuple(bool(c) for c in checks),
        )

@dataclass(frozen=True)
class MentalStateEntry:
    """Настроение и мотивация за один день (day с единицы)"""
    day: int
    mood: int = 0
    motivation: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {"day": self.day, "mood": self.mood, "motivation": self.motivation}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MentalStateEntry":
        if not isinstance(data, dict):
            raise ValidationError("Запись состояния должна быть объектом")

        return cls(
            day=_as_int(_require(data, "day", "mentalState"), "day"),
            mood=clamp_rating(_as_int(data.get("mood", 0), "mood")),
            motivation=clamp_rating(_as_int(data.get("motivation", 0), "motivation")),
        )

@dataclass(frozen=True)
class MonthRecord:
    """Сохраняемая единица: привычки месяца, ментальное состояние и время изменения"""
    habits: Tuple[Habit, ...] = field(default_factory=tuple)
    mental_state: Tuple[MentalStateEntry, ...] = field(default_factory=tuple)
    last_updated: int = 0  # epoch milliseconds

    def __post_init__(self):
        object.__setattr__(self, "habits", tuple(self.habits))
        object.__setattr__(self, "mental_state", tuple(self.mental_state))

    # ===== LOOKUPS =====

    @property
    def habit_ids(self) -> List[str]:
        return [h.id for h in self.habits]

    def habit_index(self, habit_id: str) -> int:
        """Позиция привычки в списке или -1"""
        for index, habit in enumerate(self.habits):
            if habit.id == habit_id:
                return index
        return -1

    def find_habit(self, habit_id: str) -> Optional[Habit]:
        index = self.habit_index(habit_id)
        return self.habits[index] if index >= 0 else None

    def mental_entry(self, day: int) -> Optional[MentalStateEntry]:
        """Запись состояния по номеру дня (не по позиции)"""
        for entry in self.mental_state:
            if entry.day == day:
                return entry
        return None

    # ===== COPIES =====

    def with_habits(self, habits: Iterable[Habit]) -> "MonthRecord":
        return replace(self, habits=tuple(habits))

    def with_mental_state(self, entries: Iterable[MentalStateEntry]) -> "MonthRecord":
        return replace(self, mental_state=tuple(entries))

    def touch(self, now_ms: int) -> "MonthRecord":
        return replace(self, last_updated=now_ms)

    # ===== SERIALIZATION =====

    def to_dict(self) -> Dict[str, Any]:
        return {
            "habits": [h.to_dict() for h in self.habits],
            "mentalState": [e.to_dict() for e in self.mental_state],
            "lastUpdated": self.last_updated,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], default_goal: int = 0) -> "MonthRecord":
        if not isinstance(data, dict):
            raise ValidationError("Запись месяца должна быть объектом")

        habits = _as_list(_require(data, "habits", "record"), "habits")
        mental_state = _as_list(_require(data, "mentalState", "record"), "mentalState")
        last_updated = data.get("lastUpdated")

        return cls(
            habits=tuple(Habit.from_dict(h, default_goal) for h in habits),
            mental_state=tuple(MentalStateEntry.from_dict(e) for e in mental_state),
            last_updated=0 if last_updated is None else _as_int(last_updated, "lastUpdated"),
        )

    @classmethod
    def from_json(cls, raw: str, default_goal: int = 0) -> "MonthRecord":
        try:
            data = json.loads(raw)
        except (TypeError, ValueError, RecursionError) as e:
            raise ValidationError(f"Неверный JSON: {e}")
        return cls.from_dict(data, default_goal)

# ===== FACTORIES =====

def empty_checks(total_days: int) -> Tuple[bool, ...]:
    return (False,) * total_days

def empty_mental_state(total_days: int) -> Tuple[MentalStateEntry, ...]:
    """Пустые записи состояния для каждого дня месяца"""
    return tuple(MentalStateEntry(day=day) for day in range(1, total_days + 1))
