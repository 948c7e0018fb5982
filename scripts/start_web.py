#!/usr/bin/env python3
"""
Скрипт запуска веб-дашборда HabitGrid
Использование: python -m scripts.start_web [--port PORT] [--host HOST] [--dev] [--reload]
"""

import sys
import argparse
import logging

import uvicorn

from dashboard.config import get_settings

logger = logging.getLogger(__name__)

def main():
    """Главная функция запуска веб-сервера"""
    settings = get_settings()

    parser = argparse.ArgumentParser(description='Запуск веб-дашборда HabitGrid')
    parser.add_argument('--port', type=int, default=settings.DASHBOARD_PORT, help='Порт сервера')
    parser.add_argument('--host', default=settings.DASHBOARD_HOST, help='Хост сервера')
    parser.add_argument('--dev', action='store_true', help='Режим разработки (подробные логи)')
    parser.add_argument('--reload', action='store_true', help='Автоперезагрузка при изменениях')

    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.dev else logging.INFO)
    logger.info(f"🚀 Запуск веб-сервера на http://{args.host}:{args.port}")

    try:
        uvicorn.run(
            "dashboard.app:app",
            host=args.host,
            port=args.port,
            reload=args.reload,
            log_level="debug" if args.dev else "info",
            access_log=args.dev,
            server_header=False,
        )
    except KeyboardInterrupt:
        logger.info("👋 Сервер остановлен пользователем")
    except Exception as e:
        logger.error(f"💥 Критическая ошибка: {e}")
        sys.exit(1)

if __name__ == "__main__":
    main()
