"""Infrastructure API module."""
from .errors import NotFoundError, RiotAPIError, UpstreamError
from .rate_limiter import Throttle, ThrottleState, throttle
from .riot_client import RiotAPIClient

__all__ = [
    'RiotAPIClient',
    'Throttle',
    'ThrottleState',
    'throttle',
    'RiotAPIError',
    'NotFoundError',
    'UpstreamError',
]
