"""
HabitGrid - Core
Модель месячной записи, хранилище, перенос привычек, статистика и операции
"""

from .models import Habit, MentalStateEntry, MonthRecord, HabitGridError, ValidationError
from .database import MonthRecordStore
from .storage import KeyValueStore, MemoryStore, JsonFileStore, StorageError

__all__ = [
    'Habit',
    'MentalStateEntry',
    'MonthRecord',
    'HabitGridError',
    'ValidationError',
    'MonthRecordStore',
    'KeyValueStore',
    'MemoryStore',
    'JsonFileStore',
    'StorageError',
]
