"""Busy indicator shown while the pipeline runs."""
from __future__ import annotations

import sys
from typing import Optional, TextIO


class StatusIndicator:
    """Single-line status on a terminal stream, erased by ``clear()``."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream or sys.stdout
        self._text: Optional[str] = None

    @property
    def visible(self) -> bool:
        return self._text is not None

    def show(self, text: str) -> None:
        self._text = text
        print(f"\r{text}", end="", file=self.stream, flush=True)

    def clear(self) -> None:
        if self._text is None:
            return
        print("\r" + " " * len(self._text) + "\r", end="", file=self.stream, flush=True)
        self._text = None
