"""Repository interfaces for data access."""
from abc import ABC, abstractmethod
from typing import List

from ..entities import Match, Summoner


class IMatchRepository(ABC):
    """Interface for match history access."""

    @abstractmethod
    async def get_match_ids(self, puuid: str, start: int = 0, count: int = 50) -> List[str]:
        """Most recent match ids for a player, newest first."""

    @abstractmethod
    async def get_match(self, match_id: str) -> Match:
        """A single match with all of its participants."""


class ISummonerRepository(ABC):
    """Interface for player lookups."""

    @abstractmethod
    async def get_summoner_by_name(self, summoner_name: str) -> Summoner:
        """Resolve a display name to a summoner (and its PUUID)."""
