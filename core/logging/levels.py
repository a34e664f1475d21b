"""Custom TRACE and SUCCESS levels."""
from __future__ import annotations

import logging
from enum import IntEnum


class LogLevel(IntEnum):
    TRACE = 5
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    SUCCESS = 25
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


_CUSTOM = (LogLevel.TRACE, LogLevel.SUCCESS)


def register_levels() -> None:
    for lvl in _CUSTOM:
        if logging.getLevelName(int(lvl)) != lvl.name:
            logging.addLevelName(int(lvl), lvl.name)


def to_level(value: int | str) -> int:
    """Map an int or a level name (case-insensitive) to a numeric level; INFO if unknown."""
    if isinstance(value, int):
        return value
    name = value.strip().upper()
    if name in LogLevel.__members__:
        return int(LogLevel[name])
    return logging.INFO
