#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
HabitGrid v1.0 - Key-Value Storage
Синхронное хранилище строк по ключу: в памяти и в JSON файле

Версия: 1.0.0
Дата: 2026-10-17
"""

import json
import shutil
import threading
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional
import logging

from core.models import HabitGridError

logger = logging.getLogger(__name__)

# ===== EXCEPTIONS =====

class StorageError(HabitGridError):
    """Ошибка записи или чтения хранилища"""
    pass

# ===== INTERFACE =====

class KeyValueStore(ABC):
    """Поверхность хранения: get(key) -> str | None, set(key, str)"""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        ...

    @abstractmethod
    def keys(self) -> List[str]:
        ...

    def close(self) -> None:
        """Освобождение ресурсов (по умолчанию ничего)"""
        pass

# ===== IMPLEMENTATIONS =====

class MemoryStore(KeyValueStore):
    """Хранилище в памяти процесса"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def keys(self) -> List[str]:
        return list(self._data.keys())

class JsonFileStore(KeyValueStore):
    """
    Хранилище ключ-значение в одном JSON файле

    Файл содержит объект {ключ: строка}. Каждая запись полностью
    перезаписывает файл через временный файл, поэтому прерванная
    запись не портит данные: побеждает последняя завершённая.
    """

    def __init__(self, data_file: Path):
        self.data_file = Path(data_file)
        self.file_lock = threading.RLock()
        self._data: Dict[str, str] = {}

        self.data_file.parent.mkdir(parents=True, exist_ok=True)
        self._load_sync()

    def _load_sync(self) -> None:
        """Загрузка файла в память"""
        if not self.data_file.exists():
            logger.info(f"📂 Файл хранилища {self.data_file} не найден, начинаем с пустого")
            return

        with self.file_lock:
            try:
                with open(self.data_file, 'r', encoding='utf-8') as f:
                    data = json.load(f)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                logger.error(f"❌ Файл хранилища повреждён: {e}")
                self._handle_corruption()
                return
            except OSError as e:
                raise StorageError(f"Не удалось прочитать {self.data_file}: {e}")

            if not isinstance(data, dict):
                logger.error("❌ Неверный формат файла хранилища: ожидался объект")
                self._handle_corruption()
                return

            # Нестроковые значения не могли быть записаны через set()
            self._data = {str(k): v for k, v in data.items() if isinstance(v, str)}
            logger.info(f"✅ Загружено ключей из хранилища: {len(self._data)}")

    def _handle_corruption(self) -> None:
        """Повреждённый файл откладывается в сторону, хранилище стартует пустым"""
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        aside = self.data_file.with_name(f"{self.data_file.name}.corrupted-{timestamp}")
        try:
            shutil.copy2(self.data_file, aside)
            logger.warning(f"⚠️ Повреждённый файл сохранён как {aside}")
        except OSError as e:
            logger.error(f"❌ Не удалось сохранить копию повреждённого файла: {e}")
        self._data = {}

    def _save_sync(self) -> None:
        """Атомарное сохранение через временный файл"""
        temp_file = self.data_file.with_suffix('.tmp')
        try:
            with open(temp_file, 'w', encoding='utf-8') as f:
                json.dump(self._data, f, ensure_ascii=False, indent=2)
            temp_file.replace(self.data_file)
        except OSError as e:
            if temp_file.exists():
                temp_file.unlink()
            raise StorageError(f"Не удалось сохранить {self.data_file}: {e}")

    def get(self, key: str) -> Optional[str]:
        with self.file_lock:
            return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        with self.file_lock:
            previous = self._data.get(key)
            self._data[key] = value
            try:
                self._save_sync()
            except StorageError:
                # Память не должна расходиться с файлом
                if previous is None:
                    self._data.pop(key, None)
                else:
                    self._data[key] = previous
                raise

    def keys(self) -> List[str]:
        with self.file_lock:
            return list(self._data.keys())
