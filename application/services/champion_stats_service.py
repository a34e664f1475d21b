"""Champion statistics over a player's recent match history."""
from __future__ import annotations

import logging
from typing import Awaitable, Callable, Dict, Iterable, List

from config import settings
from core.logging.context import context as log_context
from domain.entities import ChampionStats, Match
from domain.interfaces import IMatchRepository
from infrastructure.api.rate_limiter import Throttle

logger = logging.getLogger(__name__)

FetchMatch = Callable[[str], Awaitable[Match]]


async def aggregate_champion_stats(
    puuid: str,
    match_ids: Iterable[str],
    fetch_match: FetchMatch,
) -> Dict[str, ChampionStats]:
    """
    Fold a player's matches into per-champion totals.

    Matches are fetched one at a time, in the order given; each fetch is
    awaited before the next is issued. Matches in which ``puuid`` did not
    play are skipped. Errors from ``fetch_match`` propagate as-is and the
    partial result is discarded.

    Returns:
        champion name -> finalized ChampionStats
    """
    stats: Dict[str, ChampionStats] = {}

    for match_id in match_ids:
        with log_context(match_id=match_id):
            match = await fetch_match(match_id)
            participant = match.find_participant(puuid)
            if participant is None:
                logger.debug(f"{puuid} not among participants of {match_id}; skipping")
                continue

            champion = participant.champion_name
            if champion not in stats:
                stats[champion] = ChampionStats(champion_name=champion)
            stats[champion].record(participant)

    for champion_stats in stats.values():
        champion_stats.finalize()
    return stats


def sort_by_games(stats: Dict[str, ChampionStats]) -> List[ChampionStats]:
    """Most-played first; ties keep insertion order."""
    return sorted(stats.values(), key=lambda s: s.games, reverse=True)


class ChampionStatsService:
    """Lists a player's recent matches and aggregates them with a throttled fetch."""

    def __init__(
        self,
        match_repo: IMatchRepository,
        *,
        interval_ms: int | None = None,
        start: int | None = None,
        count: int | None = None,
    ):
        self.match_repo = match_repo
        self.interval_ms = settings.MATCH_FETCH_INTERVAL_MS if interval_ms is None else interval_ms
        self.start = settings.MATCH_START if start is None else start
        self.count = settings.MATCH_COUNT if count is None else count

    async def recent_match_ids(self, puuid: str) -> List[str]:
        match_ids = await self.match_repo.get_match_ids(puuid, start=self.start, count=self.count)
        logger.info(f"{len(match_ids)} match ids for {puuid} (start={self.start}, count={self.count})")
        return match_ids

    async def most_played_champions(self, puuid: str) -> Dict[str, ChampionStats]:
        match_ids = await self.recent_match_ids(puuid)
        # One throttle per run; nothing carries over between invocations.
        fetch_match = Throttle(self.match_repo.get_match, self.interval_ms)
        return await aggregate_champion_stats(puuid, match_ids, fetch_match)
