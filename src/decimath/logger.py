"""
Logger — Логгеры пакета decimath

- get_logger: логгер в пространстве имён "decimath"
- configure_logging: stream handler с общим форматом и уровнем из
  аргумента или переменной окружения DECIMATH_LOG_LEVEL

Библиотека сама вывод не настраивает (в __init__ пакета висит только
NullHandler); configure_logging вызывает приложение.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Повторный configure_logging не дублирует вывод: заменяется только
   handler, установленный предыдущим вызовом
2. Handlers, добавленные приложением (FileHandler и т.п.), не трогаются
"""

import logging
import os
from typing import Final, Optional

ROOT_LOGGER_NAME: Final[str] = "decimath"
LOG_FORMAT: Final[str] = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_LEVEL_ENV: Final[str] = "DECIMATH_LOG_LEVEL"

# Метка handler'а, установленного configure_logging
_OWNED_HANDLER_ATTR: Final[str] = "_decimath_configured"


# =============================================================================
# ЛОГГЕРЫ
# =============================================================================


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Логгер внутри пространства имён decimath.

    Examples:
        >>> get_logger("core.arithmetic").name
        'decimath.core.arithmetic'
        >>> get_logger("decimath.numeric").name
        'decimath.numeric'
    """
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


# =============================================================================
# НАСТРОЙКА ВЫВОДА
# =============================================================================


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Направить логи decimath в stderr с форматом LOG_FORMAT.

    Args:
        level: Имя уровня ("DEBUG", "info", ...); по умолчанию берётся из
               DECIMATH_LOG_LEVEL, затем INFO. Неизвестное имя → INFO

    Returns:
        Корневой логгер decimath
    """
    level_name = (level or os.getenv(LOG_LEVEL_ENV) or "INFO").strip().upper()
    resolved = getattr(logging, level_name, logging.INFO)
    if not isinstance(resolved, int):
        resolved = logging.INFO

    root = get_logger()
    for existing in list(root.handlers):
        if getattr(existing, _OWNED_HANDLER_ATTR, False):
            root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    setattr(handler, _OWNED_HANDLER_ATTR, True)

    root.addHandler(handler)
    root.setLevel(resolved)
    return root
