"""Application services root exports."""
from .champion_stats_service import (
    ChampionStatsService,
    aggregate_champion_stats,
    sort_by_games,
)

__all__ = [
    "ChampionStatsService",
    "aggregate_champion_stats",
    "sort_by_games",
]
