import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from config import LoggingConfig

_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'

def setup_logger(log_file: Optional[str] = "logs/habitgrid.log", level: str = "INFO",
                 max_bytes: int = 10_000_000, backup_count: int = 5, log_format: str = _FORMAT):
    """Корневой логгер: консоль плюс файл с ротацией (log_file=None отключает файл)"""
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(log_format)

    # Повторный вызов не должен дублировать обработчики
    for handler in list(logger.handlers):
        if getattr(handler, "_habitgrid", False):
            logger.removeHandler(handler)
            handler.close()

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(formatter)
    console._habitgrid = True
    logger.addHandler(console)

    if log_file:
        Path(log_file).parent.mkdir(exist_ok=True, parents=True)
        handler = RotatingFileHandler(log_file, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
        handler.setFormatter(formatter)
        handler._habitgrid = True
        logger.addHandler(handler)

    return logger

def setup_from_config(logging_config: LoggingConfig):
    return setup_logger(
        log_file=str(logging_config.log_file) if logging_config.log_to_file else None,
        level=logging_config.level.value,
        max_bytes=logging_config.max_bytes,
        backup_count=logging_config.backup_count,
        log_format=logging_config.log_format,
    )
