"""Use case: summoner name -> champion statistics table."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from application.services.champion_stats_service import ChampionStatsService, sort_by_games
from core.logging.context import context as log_context
from core.logging.logger import traceable
from domain.entities import ChampionStats, Summoner
from domain.interfaces import ISummonerRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChampionStatsReport:
    summoner: Summoner
    champions: List[ChampionStats] = field(default_factory=list)

    @property
    def games(self) -> int:
        """Games in which the summoner was found; skipped matches don't count."""
        return sum(c.games for c in self.champions)


class GetChampionStatsUseCase:
    """
    Resolve a summoner, then aggregate their recent matches per champion.

    Errors from any step propagate unchanged; presenting them is the
    caller's job.
    """

    def __init__(
        self,
        summoner_repo: ISummonerRepository,
        stats_service: ChampionStatsService,
    ):
        self.summoner_repo = summoner_repo
        self.stats_service = stats_service

    @traceable
    async def execute(self, summoner_name: str) -> ChampionStatsReport:
        with log_context(summoner=summoner_name):
            summoner = await self.summoner_repo.get_summoner_by_name(summoner_name)
            stats = await self.stats_service.most_played_champions(summoner.puuid)
            report = ChampionStatsReport(summoner=summoner, champions=sort_by_games(stats))
            logger.info(f"{len(report.champions)} champions over {report.games} games")
            return report
