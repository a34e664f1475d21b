"""Per-task log context carried in a contextvar."""
from __future__ import annotations

import contextvars
from typing import Any, Dict, Optional

_log_context: contextvars.ContextVar[Optional[Dict[str, Any]]] = contextvars.ContextVar(
    "champion_stats_log_context", default=None
)


def _current() -> Dict[str, Any]:
    return dict(_log_context.get() or {})


def get_context() -> Dict[str, Any]:
    return _current()


def bind(**values: Any) -> None:
    """Add fields (summoner, match_id, ...) to every record logged from this task."""
    merged = _current()
    merged.update({k: v for k, v in values.items() if v is not None})
    _log_context.set(merged)


def unbind(*keys: str) -> None:
    remaining = _current()
    for key in keys:
        remaining.pop(key, None)
    _log_context.set(remaining)


class context(object):
    """Scoped ``bind``: fields are dropped again when the block exits."""

    def __init__(self, **values: Any) -> None:
        self._values = values
        self._token: Optional[contextvars.Token] = None

    def __enter__(self) -> Dict[str, Any]:
        merged = _current()
        merged.update({k: v for k, v in self._values.items() if v is not None})
        self._token = _log_context.set(merged)
        return merged

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._token is not None:
            _log_context.reset(self._token)
            self._token = None
        return False
