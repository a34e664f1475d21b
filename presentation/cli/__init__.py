"""Presentation CLI exports."""
from .champion_stats_command import ChampionStatsCommand, render_table
from .status import StatusIndicator

__all__ = [
    "ChampionStatsCommand",
    "StatusIndicator",
    "render_table",
]
