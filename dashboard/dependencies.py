#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
HabitGrid - Dashboard Dependencies
Провайдеры зависимостей FastAPI: хранилище и сессия трекера

Версия: 1.0.0
Дата: 2026-10-17
"""

import logging
from typing import Optional

from fastapi import HTTPException, status

from config import get_config
from core.database import MonthRecordStore
from core.storage import JsonFileStore, KeyValueStore
from services.tracker_service import HabitTrackerService

logger = logging.getLogger(__name__)

# ===== ГЛОБАЛЬНЫЕ ПЕРЕМЕННЫЕ =====

# Хранилище ключ-значение (синглтон)
_store: Optional[KeyValueStore] = None

# Сессия трекера (синглтон): один локальный пользователь
_tracker_service: Optional[HabitTrackerService] = None

# ===== ИНИЦИАЛИЗАЦИЯ КОМПОНЕНТОВ =====

def init_tracker_service(store: Optional[KeyValueStore] = None) -> HabitTrackerService:
    """Инициализация сессии трекера и открытие текущего месяца"""
    global _store, _tracker_service

    if _tracker_service is None:
        config = get_config()
        logger.info("🔄 Инициализация HabitTrackerService...")

        if store is None:
            config.ensure_directories()
            store = JsonFileStore(config.storage.data_file)
        _store = store

        _tracker_service = HabitTrackerService(
            MonthRecordStore(_store),
            timezone_name=config.timezone_name,
        )
        _tracker_service.open_current_month()
        logger.info(f"✅ HabitTrackerService инициализирован: {_tracker_service.year}-{_tracker_service.month + 1:02d}")

    return _tracker_service

def close_tracker_service() -> None:
    """Освобождение ресурсов при остановке"""
    global _store, _tracker_service

    if _store is not None:
        _store.close()
    _store = None
    _tracker_service = None

# ===== DEPENDENCY PROVIDERS =====

async def get_tracker_service() -> HabitTrackerService:
    """Dependency для получения сессии трекера"""
    if _tracker_service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Сервис трекера не инициализирован"
        )
    return _tracker_service
