from fastapi import APIRouter, HTTPException, Depends, Path
from typing import Any, Dict

from core.month_key import key_for
from core.storage import StorageError
from services.tracker_service import HabitTrackerService
from shared.models import NavigateRequest, StoredMonth, StoredMonthsResponse

from ..dependencies import get_tracker_service

router = APIRouter(prefix="/api/months", tags=["months"])

@router.get("/", response_model=StoredMonthsResponse)
async def list_stored_months(
    service: HabitTrackerService = Depends(get_tracker_service)
):
    """
    Месяцы, для которых в хранилище есть записи
    """
    months = [
        StoredMonth(year=year, month=month, key=key_for(year, month))
        for year, month in service.records.list_months()
    ]
    return StoredMonthsResponse(months=months, total=len(months))

@router.get("/current", response_model=Dict[str, Any])
async def get_current_month(
    service: HabitTrackerService = Depends(get_tracker_service)
):
    """
    Представление открытого месяца
    """
    return service.get_month_view()

@router.post("/navigate", response_model=Dict[str, Any])
async def navigate_month(
    request: NavigateRequest,
    service: HabitTrackerService = Depends(get_tracker_service)
):
    """
    Переход на соседний месяц (offset = -1 / +1)
    """
    try:
        service.change_month(request.offset)
    except StorageError as e:
        raise HTTPException(status_code=500, detail=f"Ошибка сохранения месяца: {str(e)}")
    return service.get_month_view()

@router.get("/{year}/{month}", response_model=Dict[str, Any])
async def open_month(
    year: int,
    month: int = Path(..., ge=0, le=11),
    service: HabitTrackerService = Depends(get_tracker_service)
):
    """
    Открыть конкретный месяц (month с нуля)
    """
    try:
        service.open_month(year, month)
    except StorageError as e:
        raise HTTPException(status_code=500, detail=f"Ошибка сохранения месяца: {str(e)}")
    return service.get_month_view()
