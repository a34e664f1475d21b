"""Presentation layer - User interfaces."""
from .cli import ChampionStatsCommand, StatusIndicator, render_table

__all__ = [
    "ChampionStatsCommand",
    "StatusIndicator",
    "render_table",
]
