"""Infrastructure layer - API client, throttling and repositories."""
from .api import (
    NotFoundError,
    RiotAPIClient,
    RiotAPIError,
    Throttle,
    UpstreamError,
    throttle,
)
from .repositories import MatchRepository, SummonerRepository

__all__ = [
    'RiotAPIClient',
    'Throttle',
    'throttle',
    'RiotAPIError',
    'NotFoundError',
    'UpstreamError',
    'MatchRepository',
    'SummonerRepository',
]
