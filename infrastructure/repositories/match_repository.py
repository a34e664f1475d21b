"""Match repository implementation."""
import logging
from typing import List

from core.logging.logger import traceable
from domain.entities import Match
from domain.interfaces import IMatchRepository
from infrastructure.api import RiotAPIClient, UpstreamError

logger = logging.getLogger(__name__)


class MatchRepository(IMatchRepository):
    """Repository for match history using the Riot API."""

    def __init__(self, api_client: RiotAPIClient):
        self.api_client = api_client

    @traceable
    async def get_match_ids(self, puuid: str, start: int = 0, count: int = 50) -> List[str]:
        return await self.api_client.get_match_ids_by_puuid(puuid, start=start, count=count)

    @traceable
    async def get_match(self, match_id: str) -> Match:
        """
        Fetch and parse one match.

        Raises:
            UpstreamError: the match could not be fetched or parsed
        """
        data = await self.api_client.get_match_by_id(match_id)
        try:
            return Match.from_api(data)
        except (KeyError, TypeError, ValueError) as exc:
            logger.error(f"Error parsing match {match_id}: {exc!r}")
            raise UpstreamError(f"malformed payload for match {match_id}") from exc
