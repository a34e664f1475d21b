"""Domain layer - Business entities, enums, and interfaces."""
from .entities import Match, Participant, Summoner, ChampionStats
from .enums import Region
from .interfaces import IMatchRepository, ISummonerRepository

__all__ = [
    # Entities
    'Match',
    'Participant',
    'Summoner',
    'ChampionStats',
    # Enums
    'Region',
    # Interfaces
    'IMatchRepository',
    'ISummonerRepository',
]
