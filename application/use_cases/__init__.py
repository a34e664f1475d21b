"""Application use cases."""
from .champion_stats import ChampionStatsReport, GetChampionStatsUseCase

__all__ = [
    'ChampionStatsReport',
    'GetChampionStatsUseCase',
]
