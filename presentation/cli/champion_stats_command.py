"""Command-line presenter for per-champion statistics."""
from __future__ import annotations

import sys
from typing import List, Optional, Sequence, TextIO

import httpx

from application.services import ChampionStatsService
from application.use_cases import ChampionStatsReport, GetChampionStatsUseCase
from config import APIConfig, settings
from core.logging.logger import get_logger
from domain.entities import ChampionStats
from infrastructure import MatchRepository, NotFoundError, RiotAPIClient, RiotAPIError, SummonerRepository
from .status import StatusIndicator

_HEADERS = ("Champion", "Games", "Wins", "Kills", "Deaths", "Assists", "Win rate", "KDA")


def _row(stats: ChampionStats) -> List[str]:
    return [
        stats.champion_name,
        str(stats.games),
        str(stats.wins),
        str(stats.kills),
        str(stats.deaths),
        str(stats.assists),
        stats.win_rate or "-",
        stats.kda or "-",
    ]


def render_table(champions: Sequence[ChampionStats]) -> str:
    """Plain-text table, first column left-aligned, numbers right-aligned."""
    rows = [list(_HEADERS)] + [_row(c) for c in champions]
    widths = [max(len(r[i]) for r in rows) for i in range(len(_HEADERS))]

    def fmt(cells: List[str]) -> str:
        first = cells[0].ljust(widths[0])
        rest = (c.rjust(w) for c, w in zip(cells[1:], widths[1:]))
        return "  ".join([first, *rest])

    lines = [fmt(rows[0]), "  ".join("─" * w for w in widths)]
    lines.extend(fmt(r) for r in rows[1:])
    return "\n".join(lines)


class ChampionStatsCommand:
    """Top-level run of the stats pipeline for one summoner name.

    Every error is turned into one readable line; the busy indicator is
    cleared on every exit path.
    """

    def __init__(
        self,
        *,
        api_config: Optional[APIConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        interval_ms: Optional[int] = None,
        out: Optional[TextIO] = None,
    ) -> None:
        self._api_config = api_config
        self._transport = transport
        self._interval_ms = interval_ms
        self.out = out or sys.stdout
        self.status = StatusIndicator(self.out)
        self._log = get_logger(__name__, service="stats-cli")

    async def fetch(self, summoner_name: str) -> ChampionStatsReport:
        config = self._api_config or settings.api_config()
        async with RiotAPIClient(config, transport=self._transport) as api:
            use_case = GetChampionStatsUseCase(
                SummonerRepository(api),
                ChampionStatsService(MatchRepository(api), interval_ms=self._interval_ms),
            )
            return await use_case.execute(summoner_name)

    async def run(self, summoner_name: str) -> int:
        summoner_name = summoner_name.strip()
        if not summoner_name:
            print("Please enter a summoner name.", file=self.out)
            return 1

        self._log.info(lambda: f"stats-start {summoner_name}")
        self.status.show(f"Loading recent matches for {summoner_name}...")
        error: Optional[str] = None
        try:
            report = await self.fetch(summoner_name)
        except NotFoundError:
            self._log.warning(lambda: f"summoner-not-found {summoner_name}")
            error = f"Summoner '{summoner_name}' was not found."
        except RiotAPIError as exc:
            self._log.error(lambda: f"stats-failed {summoner_name}: {exc}")
            error = f"Could not load champion stats: {exc}"
        except Exception as exc:
            self._log.exception(lambda: f"stats-crashed {summoner_name}")
            error = f"Could not load champion stats: {exc}"
        finally:
            self.status.clear()

        if error is not None:
            print(error, file=self.out)
            return 1

        self._print_report(report)
        self._log.success(
            lambda: f"stats-done {summoner_name} champions={len(report.champions)}",
            extra={"champions": [c.to_dict() for c in report.champions]},
        )
        return 0

    def _print_report(self, report: ChampionStatsReport) -> None:
        name = report.summoner.summoner_name or report.summoner.puuid
        if not report.champions:
            print(f"No recent matches found for {name}.", file=self.out)
            return
        print(f"{name}: {report.games} games across {len(report.champions)} champions\n", file=self.out)
        print(render_table(report.champions), file=self.out)
