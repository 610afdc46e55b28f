# File: robots_txt/logger.py
"""robots_txt.logger: общий логгер пакета ``RobotsTxt``.

Модули берут дочерний логгер через :func:`get_logger` (``RobotsTxt.parser``,
``RobotsTxt.fetcher`` ...). Вывод идёт в stderr, чтобы stdout оставался
свободным для вердиктов и JSON; при ``log_file`` добавляется файл с ротацией.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, List, Optional, Union

DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOGGER_NAME: Final[str] = "RobotsTxt"

_MAX_BYTES: Final[int] = 1024 * 1024
_BACKUPS: Final[int] = 2

Level = Union[int, str]


def _handlers(log_file: Union[str, Path, None], fmt: str) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        handlers.append(
            RotatingFileHandler(str(log_file), maxBytes=_MAX_BYTES, backupCount=_BACKUPS, encoding="utf-8")
        )
    formatter = logging.Formatter(fmt)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def configure(
    *,
    level: Level = "WARNING",
    log_file: Union[str, Path, None] = None,
    log_format: str = DEFAULT_FORMAT,
    replace_handlers: bool = True,
) -> logging.Logger:
    """Настраивает логгер пакета и возвращает его.

    Args:
        level: уровень (``"DEBUG"``, ``logging.INFO`` ...).
        log_file: файл для записи; ``None`` — только stderr.
        log_format: формат для ``logging.Formatter``.
        replace_handlers: снять ранее установленные обработчики.
    """
    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(level)
    if replace_handlers:
        for old in list(root.handlers):
            root.removeHandler(old)
            old.close()
    for handler in _handlers(log_file, log_format):
        root.addHandler(handler)
    root.propagate = False
    return root


def init_logging(
    level: Level = "WARNING",
    log_file: Union[str, Path, None] = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Как :func:`configure`, но всегда заменяет обработчики (так делает CLI)."""
    return configure(level=level, log_file=log_file, log_format=log_format)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """``RobotsTxt`` или его потомок ``RobotsTxt.<name>``."""
    return logger.getChild(name) if name else logger


logger: logging.Logger = init_logging()

__all__ = ["logger", "configure", "init_logging", "get_logger", "DEFAULT_FORMAT", "LOGGER_NAME"]
