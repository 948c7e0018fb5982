#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
HabitGrid - Dashboard Configuration
Настройки веб-слоя с загрузкой из окружения и .env

Версия: 1.0.0
Дата: 2026-10-17
"""

from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class DashboardSettings(BaseSettings):
    """Настройки веб-дашборда HabitGrid"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ===== ОСНОВНЫЕ НАСТРОЙКИ =====

    APP_NAME: str = Field(
        default="HabitGrid Dashboard",
        description="Название приложения"
    )

    VERSION: str = Field(
        default="1.0.0",
        description="Версия дашборда"
    )

    ENVIRONMENT: str = Field(
        default="development",
        description="Среда выполнения (development/production/testing)"
    )

    DEBUG: bool = Field(
        default=True,
        description="Режим отладки"
    )

    # ===== СЕТЕВЫЕ НАСТРОЙКИ =====

    DASHBOARD_HOST: str = Field(
        default="127.0.0.1",
        description="Хост для запуска дашборда"
    )

    DASHBOARD_PORT: int = Field(
        default=8000,
        description="Порт для запуска дашборда"
    )

    # ===== CORS НАСТРОЙКИ =====

    ALLOWED_ORIGINS: str = Field(
        default="*",
        description="Разрешенные источники для CORS через запятую"
    )

    # ===== ЛОГИРОВАНИЕ =====

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Уровень логирования"
    )

    DOCS_URL: Optional[str] = Field(
        default="/api/docs",
        description="URL документации API"
    )

    # ===== ВАЛИДАТОРЫ =====

    @field_validator('ENVIRONMENT')
    @classmethod
    def validate_environment(cls, v):
        """Валидация среды выполнения"""
        allowed_envs = ['development', 'production', 'testing']
        if v.lower() not in allowed_envs:
            raise ValueError(f"ENVIRONMENT must be one of {allowed_envs}")
        return v.lower()

    @field_validator('LOG_LEVEL')
    @classmethod
    def validate_log_level(cls, v):
        """Валидация уровня логирования"""
        allowed_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in allowed_levels:
            raise ValueError(f"LOG_LEVEL must be one of {allowed_levels}")
        return v.upper()

    @field_validator('DASHBOARD_PORT')
    @classmethod
    def validate_port(cls, v):
        """Валидация порта"""
        if not 1 <= v <= 65535:
            raise ValueError("DASHBOARD_PORT must be between 1 and 65535")
        return v

    @model_validator(mode='after')
    def validate_production_settings(self):
        """В продакшене отключаем DEBUG и документацию API"""
        if self.ENVIRONMENT == 'production':
            self.DEBUG = False
            self.DOCS_URL = None
        return self

    # ===== МЕТОДЫ КОНФИГУРАЦИИ =====

    @property
    def allowed_origins(self) -> List[str]:
        """CORS origins списком"""
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(',') if origin.strip()]

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    def get_full_url(self, path: str = "") -> str:
        return f"http://{self.DASHBOARD_HOST}:{self.DASHBOARD_PORT}/{path.lstrip('/')}"

@lru_cache()
def get_settings() -> DashboardSettings:
    """Настройки создаются один раз на процесс"""
    return DashboardSettings()
