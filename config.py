#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
HabitGrid v1.0 - Configuration
Централизованная конфигурация из переменных окружения с валидацией

Версия: 1.0.0
Дата: 2026-10-17
"""

import os
import sys
import logging
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass
from enum import Enum

import pytz

class Environment(Enum):
    """Среды выполнения"""
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"

class LogLevel(Enum):
    """Уровни логирования"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

@dataclass
class StorageConfig:
    """Конфигурация локального хранилища"""
    data_dir: Path
    data_file: Path

@dataclass
class LoggingConfig:
    """Конфигурация логирования"""
    log_dir: Path
    level: LogLevel = LogLevel.INFO
    log_to_file: bool = True
    max_bytes: int = 10_000_000
    backup_count: int = 5
    log_format: str = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'

    @property
    def log_file(self) -> Path:
        return self.log_dir / "habitgrid.log"

class TrackerConfig:
    """Главный класс конфигурации"""

    def __init__(self):
        self.environment = Environment(os.getenv('ENVIRONMENT', 'development').lower())
        self._load_config()
        self._validate_config()

    def _load_config(self):
        """Загрузка конфигурации из переменных окружения"""

        data_dir = Path(os.getenv('DATA_DIR', 'data'))
        self.storage = StorageConfig(
            data_dir=data_dir,
            data_file=data_dir / os.getenv('DATA_FILE', 'habit_tracker.json'),
        )

        self.logging = LoggingConfig(
            log_dir=Path(os.getenv('LOG_DIR', 'logs')),
            level=LogLevel(os.getenv('LOG_LEVEL', 'INFO').upper()),
            log_to_file=os.getenv('LOG_TO_FILE', 'true').lower() == 'true',
            max_bytes=int(os.getenv('LOG_MAX_BYTES', 10_000_000)),
            backup_count=int(os.getenv('LOG_BACKUP_COUNT', 5)),
        )

        # Часовой пояс определяет "текущий" месяц при запуске
        self.timezone_name = os.getenv('TIMEZONE', 'UTC')

    def _validate_config(self):
        """Валидация конфигурации"""
        errors = []

        try:
            self.timezone = pytz.timezone(self.timezone_name)
        except pytz.UnknownTimeZoneError:
            errors.append(f"Неизвестный часовой пояс TIMEZONE={self.timezone_name}")

        if self.logging.max_bytes <= 0:
            errors.append("LOG_MAX_BYTES должен быть положительным числом")

        if self.logging.backup_count < 0:
            errors.append("LOG_BACKUP_COUNT не может быть отрицательным")

        if errors:
            raise ValueError("Ошибки конфигурации:\n" + "\n".join(f"• {error}" for error in errors))

    def ensure_directories(self):
        """Создание необходимых директорий"""
        directories = [self.storage.data_dir]
        if self.logging.log_to_file:
            directories.append(self.logging.log_dir)

        for directory in directories:
            directory.mkdir(parents=True, exist_ok=True)

    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT

    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация конфигурации в словарь"""
        return {
            'environment': self.environment.value,
            'data_file': str(self.storage.data_file),
            'log_level': self.logging.level.value,
            'log_to_file': self.logging.log_to_file,
            'timezone': self.timezone_name,
        }

# ===== ГЛОБАЛЬНЫЙ ЭКЗЕМПЛЯР =====

_config: Optional[TrackerConfig] = None

def get_config() -> TrackerConfig:
    """Получить глобальную конфигурацию (создаётся при первом обращении)"""
    global _config
    if _config is None:
        _config = TrackerConfig()
    return _config

def reload_config() -> TrackerConfig:
    """Перечитать переменные окружения"""
    global _config
    _config = TrackerConfig()
    return _config

__all__ = [
    'Environment',
    'LogLevel',
    'StorageConfig',
    'LoggingConfig',
    'TrackerConfig',
    'get_config',
    'reload_config',
]
