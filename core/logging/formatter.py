"""Console and JSON-lines formatters."""
from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Any, Dict

from .context import get_context

_LEVEL_COLORS = {
    "TRACE": "\033[90m",
    "DEBUG": "\033[37m",
    "INFO": "\033[36m",
    "SUCCESS": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
}
_RESET = "\033[0m"

# Attributes every LogRecord has, plus those the handler filter stamps;
# anything else arrived through ``extra=``.
_STANDARD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime", "service", "context"}


def _base_fields(record: logging.LogRecord) -> Dict[str, Any]:
    return {
        "timestamp": datetime.fromtimestamp(record.created).isoformat(timespec="milliseconds"),
        "level": record.levelname,
        "logger": record.name,
        "service": getattr(record, "service", None),
        "function": record.funcName,
        "line": record.lineno,
    }


def _context_fields(record: logging.LogRecord) -> Dict[str, Any]:
    # Stamped by the handler filter; records formatted directly fall back to the live context.
    ctx = getattr(record, "context", None)
    return dict(ctx) if ctx is not None else get_context()


def _extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    return {
        k: v for k, v in vars(record).items()
        if k not in _STANDARD_ATTRS
    }


class ConsoleFormatter(logging.Formatter):
    """One coloured line: ``time | LEVEL | service | logger:func:line | message | fields``."""

    def __init__(self, *, use_color: bool = True) -> None:
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        base = _base_fields(record)
        parts = [
            base["timestamp"],
            base["level"],
            base["service"] or "-",
            f"{base['logger']}:{base['function']}:{base['line']}",
            record.getMessage(),
        ]
        fields = {**_context_fields(record), **_extra_fields(record)}
        if fields:
            parts.append(" ".join(f"{k}={v}" for k, v in fields.items()))
        if record.exc_info:
            parts.append(self.formatException(record.exc_info))
        line = " | ".join(parts)
        if not self.use_color:
            return line
        return f"{_LEVEL_COLORS.get(base['level'], '')}{line}{_RESET}"


class JSONFormatter(logging.Formatter):
    """One JSON object per line, suitable for the rotating ``.jsonl`` file."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = _base_fields(record)
        payload["message"] = record.getMessage()
        ctx = _context_fields(record)
        if ctx:
            payload["context"] = ctx
        extra = _extra_fields(record)
        if extra:
            payload["extra"] = extra
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))
