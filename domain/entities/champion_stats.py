"""Per-champion aggregate over a player's match history."""
from dataclasses import dataclass
from typing import Optional

from .participant import Participant

PERFECT_KDA = "Perfect"


@dataclass
class ChampionStats:
    """Running totals for one champion.

    ``win_rate`` and ``kda`` stay ``None`` while games are being folded in
    and are filled by ``finalize()`` once the whole history is read.
    """

    champion_name: str
    games: int = 0
    wins: int = 0
    kills: int = 0
    deaths: int = 0
    assists: int = 0

    win_rate: Optional[str] = None
    kda: Optional[str] = None

    def record(self, participant: Participant) -> None:
        self.games += 1
        if participant.win:
            self.wins += 1
        self.kills += participant.kills
        self.deaths += participant.deaths
        self.assists += participant.assists

    def finalize(self) -> "ChampionStats":
        if self.games:
            self.win_rate = f"{self.wins / self.games * 100:.2f}%"
        else:
            self.win_rate = f"{0:.2f}%"
        if self.deaths == 0:
            self.kda = PERFECT_KDA
        else:
            self.kda = f"{(self.kills + self.assists) / self.deaths:.2f}"
        return self

    @property
    def losses(self) -> int:
        return self.games - self.wins

    @property
    def is_finalized(self) -> bool:
        return self.win_rate is not None and self.kda is not None

    def to_dict(self) -> dict:
        return {
            'champion_name': self.champion_name,
            'games': self.games,
            'wins': self.wins,
            'losses': self.losses,
            'kills': self.kills,
            'deaths': self.deaths,
            'assists': self.assists,
            'win_rate': self.win_rate,
            'kda': self.kda,
        }
