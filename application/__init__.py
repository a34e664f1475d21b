"""Application layer - Services and use cases."""
from .services import ChampionStatsService, aggregate_champion_stats, sort_by_games
from .use_cases import ChampionStatsReport, GetChampionStatsUseCase

__all__ = [
    'ChampionStatsService',
    'aggregate_champion_stats',
    'sort_by_games',
    'ChampionStatsReport',
    'GetChampionStatsUseCase',
]
