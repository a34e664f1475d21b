"""Summoner entity representing a player account."""
from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Summoner:
    """A resolved player. ``puuid`` is the id every match endpoint keys on."""

    puuid: str
    summoner_id: str = ""
    account_id: str = ""
    summoner_name: str = ""
    profile_icon_id: int = 0
    summoner_level: int = 0

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Summoner":
        """Build from a summoner-v4 payload. Raises ``KeyError`` without a puuid."""
        return cls(
            puuid=data['puuid'],
            summoner_id=data.get('id', ''),
            account_id=data.get('accountId', ''),
            summoner_name=data.get('name', ''),
            profile_icon_id=data.get('profileIconId', 0),
            summoner_level=data.get('summonerLevel', 0),
        )
