from fastapi import APIRouter, HTTPException, Depends
from typing import Any, Callable, Dict

from core.storage import StorageError
from services.tracker_service import HabitTrackerService
from shared.models import MentalValueRequest, MoveHabitRequest, RenameHabitRequest, ToggleCheckRequest

from ..dependencies import get_tracker_service

router = APIRouter(prefix="/api", tags=["habits"])

def _apply(service: HabitTrackerService, action: Callable[[], Any]) -> Dict[str, Any]:
    """Выполнить изменение и вернуть обновлённое представление месяца"""
    try:
        action()
    except StorageError as e:
        raise HTTPException(status_code=500, detail=f"Ошибка сохранения: {str(e)}")
    return service.get_month_view()

@router.post("/habits/toggle", response_model=Dict[str, Any])
async def toggle_check(
    request: ToggleCheckRequest,
    service: HabitTrackerService = Depends(get_tracker_service)
):
    """
    Переключить отметку привычки за день
    """
    return _apply(service, lambda: service.toggle_check(request.habit_id, request.day_index))

@router.post("/habits", response_model=Dict[str, Any])
async def add_habit(
    service: HabitTrackerService = Depends(get_tracker_service)
):
    """
    Добавить новую привычку в конец списка
    """
    return _apply(service, service.add_habit)

@router.put("/habits/{habit_id}", response_model=Dict[str, Any])
async def rename_habit(
    habit_id: str,
    request: RenameHabitRequest,
    service: HabitTrackerService = Depends(get_tracker_service)
):
    """
    Изменить название и иконку привычки
    """
    return _apply(service, lambda: service.rename_habit(habit_id, request.name, request.icon))

@router.post("/habits/move", response_model=Dict[str, Any])
async def move_habit(
    request: MoveHabitRequest,
    service: HabitTrackerService = Depends(get_tracker_service)
):
    """
    Переместить привычку вверх или вниз
    """
    return _apply(service, lambda: service.move_habit(request.index, request.direction.value))

# ===== ДВУХФАЗНОЕ УДАЛЕНИЕ =====

@router.post("/habits/{habit_id}/delete-request", response_model=Dict[str, Any])
async def request_delete(
    habit_id: str,
    service: HabitTrackerService = Depends(get_tracker_service)
):
    """
    Запросить удаление: привычка ждёт подтверждения
    """
    if service.request_delete(habit_id) is None:
        raise HTTPException(status_code=404, detail=f"Привычка {habit_id} не найдена")
    return service.get_month_view()

@router.post("/habits/delete-confirm", response_model=Dict[str, Any])
async def confirm_delete(
    service: HabitTrackerService = Depends(get_tracker_service)
):
    """
    Подтвердить удаление: отметки привычки за этот месяц будут потеряны
    """
    return _apply(service, service.confirm_delete)

@router.post("/habits/delete-cancel", response_model=Dict[str, Any])
async def cancel_delete(
    service: HabitTrackerService = Depends(get_tracker_service)
):
    service.cancel_delete()
    return service.get_month_view()

# ===== МЕНТАЛЬНОЕ СОСТОЯНИЕ =====

@router.post("/mental-state", response_model=Dict[str, Any])
async def set_mental_value(
    request: MentalValueRequest,
    service: HabitTrackerService = Depends(get_tracker_service)
):
    """
    Записать настроение или мотивацию за день (0-10, пустое значение = 0)
    """
    return _apply(service, lambda: service.set_mental_value(request.day_index, request.field.value, request.value))
