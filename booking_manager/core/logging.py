"""
Логирование приложения.

structlog формирует события ключ-значение и передает их стандартному
logging. Вывод идет в stderr, чтобы не смешиваться с ответами команд:
JSON в production, строка для чтения человеком в остальных окружениях.
Повторный вызов setup_logging заменяет обработчик, а не добавляет второй.
"""

import logging
import sys
from typing import List, Optional

import structlog

from booking_manager.core.config import Settings, get_settings

HANDLER_NAME = "booking_manager"


def _event_processors(production: bool) -> List:
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if production:
        processors.append(structlog.processors.format_exc_info)
    return processors


def _build_formatter(production: bool) -> logging.Formatter:
    if production:
        renderer = structlog.processors.JSONRenderer(ensure_ascii=False)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)
    return structlog.stdlib.ProcessorFormatter(
        # Записи из чужих библиотек проходят через те же процессоры.
        foreign_pre_chain=_event_processors(production),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def _replace_handler(root: logging.Logger, handler: logging.Handler) -> None:
    for existing in list(root.handlers):
        if existing.get_name() == HANDLER_NAME:
            root.removeHandler(existing)
            existing.close()
    root.addHandler(handler)


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Настраивает structlog и корневой логгер по настройкам приложения."""
    settings = settings or get_settings()
    production = settings.ENVIRONMENT == "production"

    structlog.configure(
        processors=[
            *_event_processors(production),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(_build_formatter(production))

    root = logging.getLogger()
    _replace_handler(root, handler)
    root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
