# services/tracker_service.py

import logging
from typing import Any, Callable, Dict, Optional

from core import analytics
from core.carry_over import load_or_resolve
from core.database import MonthRecordStore
from core.models import Habit, MonthRecord
from core.month_calendar import day_configs, days_in_month, group_into_weeks, month_name
from core.month_key import shift_month
from core.mutations import (
    AddHabit,
    DeleteHabit,
    Intent,
    MoveHabit,
    RenameHabit,
    SetMentalValue,
    ToggleCheck,
    apply_intent,
)
from utils.datetime_utils import current_year_month, now_ms

logger = logging.getLogger(__name__)

class HabitTrackerService:
    """
    Сессия трекера: единственный владелец записи отображаемого месяца

    Обеспечивает:
    - Загрузку месяца или его построение переносом/шаблоном
    - Сохранение после каждого изменения (сначала изменение, потом запись)
    - Навигацию по месяцам без смешивания данных соседних месяцев
    - Двухфазное удаление привычки (запрос, затем подтверждение)
    """

    def __init__(self, records: MonthRecordStore, clock: Callable[[], int] = now_ms,
                 timezone_name: str = "UTC"):
        self.records = records
        self.clock = clock
        self.timezone_name = timezone_name

        self.year: Optional[int] = None
        self.month: Optional[int] = None
        self._record: Optional[MonthRecord] = None
        self._pending_delete: Optional[str] = None

    # ===== СОСТОЯНИЕ =====

    @property
    def is_open(self) -> bool:
        return self._record is not None

    @property
    def record(self) -> MonthRecord:
        self._require_open()
        return self._record

    def _require_open(self) -> None:
        if self._record is None:
            raise RuntimeError("Месяц не открыт: вызовите open_month()")

    @property
    def days_in_month(self) -> int:
        self._require_open()
        return days_in_month(self.year, self.month)

    @property
    def pending_delete(self) -> Optional[Habit]:
        """Привычка, ожидающая подтверждения удаления"""
        if self._pending_delete is None or self._record is None:
            return None
        return self._record.find_habit(self._pending_delete)

    # ===== НАВИГАЦИЯ =====

    def open_month(self, year: int, month: int) -> MonthRecord:
        """Открыть месяц; прежняя запись отбрасывается без слияния"""
        self._record = None
        self._pending_delete = None
        self.year, self.month = year, month

        record, created = load_or_resolve(self.records, year, month, self.clock())
        self._record = record
        if created:
            self._persist()
        return self._record

    def change_month(self, offset: int) -> MonthRecord:
        """Переход на offset месяцев (обычно ±1)"""
        self._require_open()
        return self.open_month(*shift_month(self.year, self.month, offset))

    def open_current_month(self) -> MonthRecord:
        return self.open_month(*current_year_month(self.timezone_name))

    # ===== ИЗМЕНЕНИЯ =====

    def dispatch(self, intent: Intent) -> MonthRecord:
        """Применить намерение и сохранить запись, если она изменилась"""
        current = self.record
        updated = apply_intent(current, intent, self.days_in_month)
        if updated == current:
            return current

        self._record = updated
        if self._pending_delete is not None and updated.find_habit(self._pending_delete) is None:
            self._pending_delete = None
        self._persist()
        return self._record

    def toggle_check(self, habit_id: str, day_index: int) -> MonthRecord:
        return self.dispatch(ToggleCheck(habit_id, day_index))

    def rename_habit(self, habit_id: str, name: str, icon: str) -> MonthRecord:
        return self.dispatch(RenameHabit(habit_id, name, icon))

    def add_habit(self) -> MonthRecord:
        return self.dispatch(AddHabit())

    def move_habit(self, index: int, direction: str) -> MonthRecord:
        return self.dispatch(MoveHabit(index, direction))

    def set_mental_value(self, day_index: int, field: str, value: Any) -> MonthRecord:
        return self.dispatch(SetMentalValue(day_index, field, value))

    # ===== УДАЛЕНИЕ =====

    def request_delete(self, habit_id: str) -> Optional[Habit]:
        """Первая фаза удаления: запомнить привычку до подтверждения"""
        habit = self.record.find_habit(habit_id)
        self._pending_delete = habit.id if habit else None
        return habit

    def confirm_delete(self) -> MonthRecord:
        """Вторая фаза: удалить привычку из записи текущего месяца"""
        habit_id, self._pending_delete = self._pending_delete, None
        if habit_id is None:
            return self.record
        logger.info(f"🗑 Удаление привычки {habit_id} из {self.year}-{self.month + 1:02d}")
        return self.dispatch(DeleteHabit(habit_id))

    def cancel_delete(self) -> None:
        self._pending_delete = None

    # ===== ПРЕДСТАВЛЕНИЕ =====

    def get_month_view(self) -> Dict[str, Any]:
        """Всё, что нужно слою отображения для текущего месяца"""
        record = self.record
        total_days = self.days_in_month
        habits = record.habits
        pending = self.pending_delete

        return {
            "year": self.year,
            "month": self.month,
            "monthName": month_name(self.month),
            "daysInMonth": total_days,
            "days": day_configs(self.year, self.month),
            "weeks": group_into_weeks(total_days),
            "habits": [h.to_dict() for h in habits],
            "mentalState": analytics.mental_state_series(record.mental_state),
            "dailyStats": analytics.daily_stats_series(habits, total_days),
            "summary": analytics.summary(habits, total_days),
            "analysis": analytics.habit_analysis(habits),
            "charts": {
                "dailyProgress": analytics.habit_chart_series(habits, total_days),
                "mentalState": analytics.mental_state_series(record.mental_state),
            },
            "lastUpdated": record.last_updated,
            "pendingDelete": pending.to_dict() if pending else None,
        }

    # ===== ВНУТРЕННЕЕ =====

    def _persist(self) -> None:
        """Записать полностью применённое изменение"""
        self._record = self._record.touch(self.clock())
        self.records.save(self.year, self.month, self._record)

    def get_service_metrics(self) -> Dict[str, Any]:
        return {
            "open_month": None if self._record is None else f"{self.year}-{self.month}",
            "habits": 0 if self._record is None else len(self._record.habits),
            "store": self.records.get_stats(),
        }
