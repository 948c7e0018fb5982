#!/usr/bin/env python3
"""
Charts API для HabitGrid Dashboard
Числовые ряды для графиков прогресса и ментального состояния
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends

from core import analytics
from services.tracker_service import HabitTrackerService

from ..dependencies import get_tracker_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/charts", tags=["charts"])

@router.get("/daily-progress", response_model=Dict[str, Any])
async def get_daily_progress_chart(
    service: HabitTrackerService = Depends(get_tracker_service)
):
    """Процент выполненных привычек по дням месяца"""
    habits = service.record.habits
    total_days = service.days_in_month
    series = analytics.habit_chart_series(habits, total_days)

    return {
        "chart_type": "area",
        "labels": [point["day"] for point in series],
        "datasets": [
            {"key": "value", "label": "Progress %", "data": [point["value"] for point in series]}
        ],
        "points": series,
    }

@router.get("/mental-state", response_model=Dict[str, Any])
async def get_mental_state_chart(
    service: HabitTrackerService = Depends(get_tracker_service)
):
    """Настроение и мотивация по дням (0 = нет записи)"""
    series = analytics.mental_state_series(service.record.mental_state)

    return {
        "chart_type": "area",
        "labels": [point["day"] for point in series],
        "datasets": [
            {"key": "mood", "label": "Mood", "data": [point["mood"] for point in series]},
            {"key": "motivation", "label": "Motivation", "data": [point["motivation"] for point in series]},
        ],
        "points": series,
    }

@router.get("/habits", response_model=Dict[str, Any])
async def get_habits_chart(
    service: HabitTrackerService = Depends(get_tracker_service)
):
    """Факт и цель по каждой привычке"""
    rows = analytics.habit_analysis(service.record.habits)

    return {
        "chart_type": "bar",
        "labels": [row["name"] for row in rows],
        "datasets": [
            {"key": "actual", "label": "Actual", "data": [row["actual"] for row in rows]},
            {"key": "goal", "label": "Goal", "data": [row["goal"] for row in rows]},
        ],
        "rows": rows,
    }
