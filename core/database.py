#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
HabitGrid v1.0 - Month Record Store
Загрузка и сохранение месячных записей с согласованием длины массивов

Хранилище ключ-значение передаётся снаружи. Повреждённые записи
считаются отсутствующими: пользователь никогда не блокируется
из-за порчи данных, вместо этого срабатывает перенос привычек.

Версия: 1.0.0
Дата: 2026-10-17
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple
import logging

from core.models import Habit, MentalStateEntry, MonthRecord, ValidationError
from core.month_calendar import days_in_month
from core.month_key import key_for, parse_key
from core.storage import KeyValueStore

logger = logging.getLogger(__name__)

# ===== HELPER CLASSES =====

@dataclass
class StoreStats:
    """Статистика хранилища записей"""
    load_count: int = 0
    save_count: int = 0
    missing_count: int = 0
    malformed_count: int = 0
    reconciled_count: int = 0
    last_save: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'load_count': self.load_count,
            'save_count': self.save_count,
            'missing_count': self.missing_count,
            'malformed_count': self.malformed_count,
            'reconciled_count': self.reconciled_count,
            'last_save': self.last_save,
        }

# ===== RECONCILIATION =====

def reconcile_checks(habit: Habit, total_days: int) -> Habit:
    """Приведение checks к длине месяца; значения сохраняются по индексу"""
    if len(habit.checks) == total_days:
        return habit
    return habit.with_checks(habit.is_checked(i) for i in range(total_days))

def reconcile_mental_state(entries: Tuple[MentalStateEntry, ...], total_days: int) -> Tuple[MentalStateEntry, ...]:
    """Ровно одна запись на каждый день; недостающие дни заполняются нулями"""
    by_day: Dict[int, MentalStateEntry] = {}
    for entry in entries:
        # Первая запись для дня побеждает
        by_day.setdefault(entry.day, entry)

    return tuple(
        by_day.get(day) or MentalStateEntry(day=day)
        for day in range(1, total_days + 1)
    )

def reconcile_record(record: MonthRecord, total_days: int) -> MonthRecord:
    """Согласование записи с длиной месяца; привычки никогда не удаляются"""
    habits = tuple(reconcile_checks(h, total_days) for h in record.habits)
    mental_state = reconcile_mental_state(record.mental_state, total_days)

    if habits == record.habits and mental_state == record.mental_state:
        return record
    return record.with_habits(habits).with_mental_state(mental_state)

# ===== STORE =====

class MonthRecordStore:
    """Единственный писатель месячных записей в хранилище"""

    def __init__(self, store: KeyValueStore):
        self.store = store
        self.stats = StoreStats()

    def load(self, year: int, month: int) -> Optional[MonthRecord]:
        """Загрузить запись месяца; None если её нет или она повреждена"""
        key = key_for(year, month)
        raw = self.store.get(key)
        self.stats.load_count += 1

        if raw is None:
            self.stats.missing_count += 1
            return None

        total_days = days_in_month(year, month)
        try:
            record = MonthRecord.from_json(raw, default_goal=total_days)
        except ValidationError as e:
            self.stats.malformed_count += 1
            logger.warning(f"⚠️ Запись {key} повреждена и будет пересоздана: {e}")
            return None

        reconciled = reconcile_record(record, total_days)
        if reconciled is not record:
            self.stats.reconciled_count += 1
            logger.debug(f"Запись {key} согласована с длиной месяца ({total_days} дн.)")
        return reconciled

    def save(self, year: int, month: int, record: MonthRecord) -> None:
        """Полная перезапись ключа месяца"""
        self.store.set(key_for(year, month), record.to_json())
        self.stats.save_count += 1
        self.stats.last_save = datetime.now().isoformat()

    def exists(self, year: int, month: int) -> bool:
        return self.store.get(key_for(year, month)) is not None

    def list_months(self) -> List[Tuple[int, int]]:
        """Все сохранённые месяцы по возрастанию"""
        months = [parse_key(key) for key in self.store.keys()]
        return sorted(m for m in months if m is not None)

    def get_stats(self) -> Dict[str, Any]:
        return self.stats.to_dict()
