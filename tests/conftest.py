import itertools

import pytest

from core.database import MonthRecordStore
from core.models import Habit, MonthRecord, empty_checks, empty_mental_state
from core.storage import MemoryStore
from services.tracker_service import HabitTrackerService

class FakeClock:
    """Монотонные миллисекунды для проверки lastUpdated"""

    def __init__(self, start: int = 1_700_000_000_000):
        self._counter = itertools.count(start, 1000)
        self.last = None

    def __call__(self) -> int:
        self.last = next(self._counter)
        return self.last

@pytest.fixture
def memory_store():
    return MemoryStore()

@pytest.fixture
def records(memory_store):
    return MonthRecordStore(memory_store)

@pytest.fixture
def clock():
    return FakeClock()

@pytest.fixture
def service(records, clock):
    return HabitTrackerService(records, clock=clock)

def make_habit(habit_id, total_days, checked=(), name=None, goal=None, icon="⭐"):
    checks = [i in checked for i in range(total_days)]
    return Habit(
        id=habit_id,
        name=name or f"Habit {habit_id}",
        icon=icon,
        goal=total_days if goal is None else goal,
        checks=checks,
    )

def make_record(total_days, habits=(), last_updated=0):
    return MonthRecord(
        habits=tuple(habits),
        mental_state=empty_mental_state(total_days),
        last_updated=last_updated,
    )

@pytest.fixture
def sample_record():
    """Февраль 2024: три привычки, часть дней отмечена"""
    return make_record(29, [
        make_habit("a", 29, checked={0, 1, 2}),
        make_habit("b", 29, checked={0}),
        make_habit("c", 29),
    ], last_updated=123)
