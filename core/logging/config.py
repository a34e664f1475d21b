"""Root logger setup: optional console handler and a queue-fed JSON-lines file."""
from __future__ import annotations

import logging
import os
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from queue import Queue
from typing import Optional

from .context import get_context
from .formatter import ConsoleFormatter, JSONFormatter
from .levels import register_levels, to_level

_listener: QueueListener | None = None


class _ServiceFilter(logging.Filter):
    """Stamp the process-wide service and the caller's log context on each record.

    Runs in the calling thread, before the record is queued; the file
    listener's thread never sees the caller's contextvars.
    """

    def __init__(self, service: str) -> None:
        super().__init__()
        self.service = service

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "service", None) is None:
            record.service = self.service
        if getattr(record, "context", None) is None:
            record.context = get_context()
        return True


def bootstrap_logging(
    *,
    service: str = "champion-stats",
    level: str | int | None = None,
    log_dir: Optional[Path] = None,
    log_file_name: str = "champion_stats.jsonl",
    max_bytes: int = 2_000_000,
    backup_count: int = 3,
) -> None:
    """Configure the root logger once per process.

    Console output is opt-in via ``LOG_CONSOLE=true`` (the CLI owns stdout).
    When ``log_dir`` is given, records are shipped through a queue to a
    rotating JSON-lines file so the event loop never blocks on disk I/O.
    """
    global _listener
    shutdown_logging()
    register_levels()

    root = logging.getLogger()
    root.handlers.clear()
    lvl = to_level(level or os.getenv("LOG_LEVEL", "INFO"))
    root.setLevel(lvl)
    service_filter = _ServiceFilter(service)

    if os.getenv("LOG_CONSOLE", "false").strip().lower() == "true":
        console = logging.StreamHandler()
        console_level = os.getenv("LOG_CONSOLE_LEVEL", "")
        console.setLevel(to_level(console_level) if console_level else lvl)
        console.setFormatter(ConsoleFormatter())
        console.addFilter(service_filter)
        root.addHandler(console)

    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            str(log_dir / log_file_name), maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
        file_handler.setLevel(lvl)
        file_handler.setFormatter(JSONFormatter())
        q: Queue[logging.LogRecord] = Queue(-1)
        queue_handler = QueueHandler(q)
        queue_handler.addFilter(service_filter)
        root.addHandler(queue_handler)
        _listener = QueueListener(q, file_handler, respect_handler_level=True)
        _listener.start()

    if not root.handlers:
        root.addHandler(logging.NullHandler())


def shutdown_logging() -> None:
    """Flush and stop the file listener, if one is running."""
    global _listener
    if _listener is not None:
        _listener.stop()
        _listener = None
