"""Domain entities."""
from .participant import Participant
from .match import Match
from .summoner import Summoner
from .champion_stats import ChampionStats

__all__ = [
    'Participant',
    'Match',
    'Summoner',
    'ChampionStats',
]
