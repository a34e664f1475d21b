"""Summoner repository implementation."""
import logging

from core.logging.logger import traceable
from domain.entities import Summoner
from domain.interfaces import ISummonerRepository
from infrastructure.api import RiotAPIClient, UpstreamError

logger = logging.getLogger(__name__)


class SummonerRepository(ISummonerRepository):
    """Resolves display names to summoners through the Riot API."""

    def __init__(self, api_client: RiotAPIClient):
        self.api_client = api_client

    @traceable
    async def get_summoner_by_name(self, summoner_name: str) -> Summoner:
        """
        Resolve a display name.

        Args:
            summoner_name: Name as typed by the user

        Returns:
            Summoner entity carrying the PUUID

        Raises:
            NotFoundError: no such summoner
            UpstreamError: request failed or the payload lacks a PUUID
        """
        data = await self.api_client.get_summoner_by_name(summoner_name)
        try:
            summoner = Summoner.from_api(data)
        except (KeyError, TypeError) as exc:
            logger.error(f"Malformed summoner payload for '{summoner_name}': {exc!r}")
            raise UpstreamError(f"malformed summoner payload for '{summoner_name}'") from exc
        logger.debug(f"resolved '{summoner_name}' -> {summoner.puuid}")
        return summoner
