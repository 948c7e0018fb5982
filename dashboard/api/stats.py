from fastapi import APIRouter, Depends, Query, Response
from typing import Any, Dict

from core import analytics
from services.data_export import export_month_csv, export_month_json
from services.tracker_service import HabitTrackerService
from shared.models import ExportFormat

from ..dependencies import get_tracker_service

router = APIRouter(prefix="/api", tags=["statistics"])

@router.get("/stats/summary", response_model=Dict[str, Any])
async def get_summary(
    service: HabitTrackerService = Depends(get_tracker_service)
):
    """
    Итоги месяца для заголовка: всего привычек, возможных и фактических отметок
    """
    return analytics.summary(service.record.habits, service.days_in_month)

@router.get("/stats/daily", response_model=Dict[str, Any])
async def get_daily_stats(
    service: HabitTrackerService = Depends(get_tracker_service)
):
    """
    Строки "Progress / Done / Not Done" для каждого дня
    """
    return {
        "year": service.year,
        "month": service.month,
        "days": analytics.daily_stats_series(service.record.habits, service.days_in_month),
    }

@router.get("/stats/analysis", response_model=Dict[str, Any])
async def get_habit_analysis(
    service: HabitTrackerService = Depends(get_tracker_service)
):
    """
    Прогресс каждой привычки относительно её цели
    """
    return {"habits": analytics.habit_analysis(service.record.habits)}

@router.get("/export")
async def export_month(
    format: ExportFormat = Query(ExportFormat.JSON),
    service: HabitTrackerService = Depends(get_tracker_service)
):
    """
    Экспорт открытого месяца в JSON или CSV
    """
    filename = f"habits_{service.year}_{service.month + 1:02d}.{format.value}"
    headers = {"Content-Disposition": f'attachment; filename="{filename}"'}

    if format == ExportFormat.CSV:
        content = export_month_csv(service.record, service.year, service.month)
        return Response(content=content, media_type="text/csv; charset=utf-8", headers=headers)

    content = export_month_json(service.record)
    return Response(content=content, media_type="application/json", headers=headers)
