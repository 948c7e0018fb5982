#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
HabitGrid Web Dashboard - FastAPI Application
JSON-слой отображения: представление месяца и намерения пользователя

Версия: 1.0.0
Дата: 2026-10-17
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Depends
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from config import get_config
from dashboard.api import charts, habits, months, stats
from dashboard.config import get_settings
from dashboard.dependencies import close_tracker_service, get_tracker_service, init_tracker_service
from services.tracker_service import HabitTrackerService
from shared.models import HealthCheck
from utils.logger import setup_from_config

logger = logging.getLogger(__name__)

settings = get_settings()
app_start_time = time.time()

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Управление жизненным циклом приложения"""
    global app_start_time

    # Startup
    setup_from_config(get_config().logging)
    logger.info("🚀 Запуск HabitGrid Dashboard...")
    app_start_time = time.time()

    service = init_tracker_service()
    logger.info(f"📊 Сохранённых месяцев: {len(service.records.list_months())}")
    logger.info(f"🌐 Dashboard доступен на: {settings.get_full_url()}")

    yield

    # Shutdown
    logger.info("🛑 Остановка Dashboard...")
    close_tracker_service()
    logger.info("✅ Ресурсы очищены")

# Создание FastAPI приложения
app = FastAPI(
    title=settings.APP_NAME,
    description="Трекер привычек по месяцам: отметки, настроение и мотивация",
    version=settings.VERSION,
    docs_url=settings.DOCS_URL if settings.DEBUG else None,
    redoc_url=None,
    lifespan=lifespan
)

# ===== MIDDLEWARE =====

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "OPTIONS"],
    allow_headers=["*"],
)

# Gzip compression
app.add_middleware(GZipMiddleware, minimum_size=1000)

@app.middleware("http")
async def logging_middleware(request: Request, call_next):
    """Логирование запросов со временем обработки"""
    start_time = time.time()

    try:
        response = await call_next(request)
    except Exception as e:
        process_time = time.time() - start_time
        logger.exception(f"❌ Ошибка обработки запроса {request.method} {request.url.path}: {e} ({process_time:.3f}s)")
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    process_time = time.time() - start_time
    logger.info(f"{request.method} {request.url.path} - {response.status_code} - {process_time:.3f}s")
    response.headers["X-Process-Time"] = f"{process_time:.4f}"
    return response

# ===== ROUTERS =====

app.include_router(months.router)
app.include_router(habits.router)
app.include_router(charts.router)
app.include_router(stats.router)

@app.get("/health", response_model=HealthCheck)
async def health_check(service: HabitTrackerService = Depends(get_tracker_service)):
    """Проверка состояния сервиса"""
    metrics = service.get_service_metrics()
    return HealthCheck(
        status="healthy",
        service=settings.APP_NAME,
        version=settings.VERSION,
        timestamp=time.time() - app_start_time,
        open_month=metrics["open_month"],
        stored_months=len(service.records.list_months()),
    )
