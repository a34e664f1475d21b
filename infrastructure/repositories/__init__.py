"""Infrastructure repositories module."""
from .match_repository import MatchRepository
from .summoner_repository import SummonerRepository

__all__ = [
    'MatchRepository',
    'SummonerRepository',
]
