from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, List, Optional
from datetime import datetime
from enum import Enum

# Базовые перечисления
class MoveDirection(str, Enum):
    UP = "up"
    DOWN = "down"

class MentalField(str, Enum):
    MOOD = "mood"
    MOTIVATION = "motivation"

class ExportFormat(str, Enum):
    JSON = "json"
    CSV = "csv"

class CamelModel(BaseModel):
    """Тела запросов приходят в camelCase, как в формате хранения"""
    model_config = ConfigDict(populate_by_name=True)

# Модели для изменений
class NavigateRequest(CamelModel):
    offset: int = Field(..., ge=-1200, le=1200)

class ToggleCheckRequest(CamelModel):
    habit_id: str = Field(..., alias="habitId")
    day_index: int = Field(..., alias="dayIndex")

class RenameHabitRequest(CamelModel):
    name: str
    icon: str = ""

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('Название привычки не может быть пустым')
        return v

class MoveHabitRequest(CamelModel):
    index: int
    direction: MoveDirection

class MentalValueRequest(CamelModel):
    day_index: int = Field(..., alias="dayIndex")
    field: MentalField
    # Сырой ввод: строка из поля ввода или число, разбирается снисходительно
    value: Any = None

# Модели для API ответов
class StoredMonth(BaseModel):
    year: int
    month: int
    key: str

class StoredMonthsResponse(BaseModel):
    months: List[StoredMonth]
    total: int

class HealthCheck(BaseModel):
    status: str
    service: str
    version: str
    timestamp: float
    open_month: Optional[str] = None
    stored_months: int = 0
    checked_at: datetime = Field(default_factory=datetime.now)
