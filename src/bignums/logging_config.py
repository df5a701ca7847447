"""
Logging — структурированное логирование bignums

Библиотека не настраивает root logger при импорте: пакетный logger получает
NullHandler, а приложение вызывает setup_logging() явно.

Использование:
    from bignums.logging_config import get_logger

    logger = get_logger(__name__)
    logger.debug("chain error recorded", extra={"kind": "DIVISION_BY_ZERO"})
"""

import logging
import sys
from typing import Any, MutableMapping, Optional, TextIO, Tuple

PACKAGE_LOGGER_NAME = "bignums"

DEFAULT_LOG_LEVEL: int = logging.WARNING


class ChainLogFormatter(logging.Formatter):
    """
    Формат: [TIMESTAMP] [LEVEL] [COMPONENT] MESSAGE | key=value | ...
    """

    def __init__(self, include_extra: bool = True) -> None:
        self.include_extra: bool = include_extra
        fmt = "[%(asctime)s] [%(levelname)-8s] [%(name)s] %(message)s"
        super().__init__(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        log_message = super().format(record)

        if self.include_extra and hasattr(record, "extra_info"):
            extra_str = " | ".join(f"{k}={v}" for k, v in record.extra_info.items())
            if extra_str:
                log_message += f" | {extra_str}"

        return log_message


class StructuredLogger(logging.LoggerAdapter):
    """Adapter, переносящий kwargs['extra'] в record.extra_info."""

    def process(
        self, msg: str, kwargs: MutableMapping[str, Any]
    ) -> Tuple[str, MutableMapping[str, Any]]:
        extra = kwargs.get("extra", {})
        if extra:
            kwargs["extra"] = {"extra_info": extra}
        return msg, kwargs


def setup_logging(
    level: int = DEFAULT_LOG_LEVEL,
    stream: Optional[TextIO] = None,
) -> logging.Handler:
    """
    Консольный handler для пакетного logger'а.

    Повторный вызов заменяет ранее установленный handler (без дубликатов).

    Args:
        level: Уровень логирования
        stream: Поток вывода (default: sys.stderr)

    Returns:
        Установленный handler
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)

    for handler in list(package_logger.handlers):
        if getattr(handler, "_bignums_console", False):
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(ChainLogFormatter(include_extra=True))
    handler._bignums_console = True  # type: ignore[attr-defined]
    package_logger.addHandler(handler)
    return handler


def get_logger(name: str) -> StructuredLogger:
    """
    Структурированный logger для модуля.

    Args:
        name: Имя модуля (обычно __name__)
    """
    return StructuredLogger(logging.getLogger(name), {})


logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())
