"""Participant entity representing a player in a match."""
from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Participant:
    """One player's line in a finished match."""

    puuid: str
    champion_name: str
    champion_id: int = 0
    team_id: int = 0

    # Match outcome
    win: bool = False
    kills: int = 0
    deaths: int = 0
    assists: int = 0

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Participant":
        """Build from a match-v5 ``info.participants[]`` item.

        ``puuid`` and ``championName`` are required; counters default to 0.
        """
        return cls(
            puuid=data['puuid'],
            champion_name=data['championName'],
            champion_id=int(data.get('championId', 0)),
            team_id=int(data.get('teamId', 0)),
            win=bool(data.get('win', False)),
            kills=int(data.get('kills', 0)),
            deaths=int(data.get('deaths', 0)),
            assists=int(data.get('assists', 0)),
        )
