"""Riot Games API client."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from config import APIConfig
from .errors import NotFoundError, UpstreamError

logger = logging.getLogger(__name__)


class RiotAPIClient:
    """
    Asynchronous Riot API client.

    Riot splits routing: summoner lookups live on the platform host
    (``euw1``), match history on the regional one (``europe``). Each gets its
    own ``httpx.AsyncClient``; the key rides along as ``api_key`` on every
    request. Nothing is retried: any failure surfaces as ``UpstreamError``.
    """

    def __init__(self, config: APIConfig, *, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        self._transport = transport
        self.platform: Optional[httpx.AsyncClient] = None
        self.regional: Optional[httpx.AsyncClient] = None

    def _session(self, base_url: str) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=base_url,
            params={"api_key": self.config.api_key},
            timeout=self.config.timeout,
            transport=self._transport,
        )

    async def __aenter__(self):
        self.platform = self._session(self.config.platform_base_url)
        self.regional = self._session(self.config.regional_base_url)
        return self

    async def __aexit__(self, *_):
        for session in (self.platform, self.regional):
            if session is not None:
                await session.aclose()
        self.platform = None
        self.regional = None

    def _redact(self, url: httpx.URL | str) -> str:
        url = httpx.URL(str(url))
        if "api_key" in url.params:
            url = url.copy_set_param("api_key", "***")
        return str(url)

    async def _make_request(
        self,
        session: Optional[httpx.AsyncClient],
        path: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        if session is None:
            raise RuntimeError("RiotAPIClient must be used as an async context manager")

        try:
            response = await session.get(path, params=params)
        except httpx.TimeoutException as exc:
            logger.error(f"Timeout calling {path}: {exc!r}")
            raise UpstreamError(f"timed out calling {path}") from exc
        except httpx.HTTPError as exc:
            logger.error(f"Network error calling {path}: {exc!r}")
            raise UpstreamError(f"network error calling {path}: {exc}") from exc

        url = self._redact(response.request.url)

        if response.is_success:
            try:
                return response.json()
            except ValueError as exc:
                logger.error(f"Malformed JSON from {url}")
                raise UpstreamError("malformed response payload", url=url) from exc

        if response.status_code in (401, 403):
            logger.error(f"{response.status_code} from Riot API, check RIOT_KEY")
        elif response.status_code == 429:
            retry_after = response.headers.get("Retry-After", "?")
            logger.warning(f"429 rate-limited (Retry-After: {retry_after}s) for {url}")
        else:
            logger.warning(f"HTTP {response.status_code} for {url}")

        raise UpstreamError(
            f"request to {path} failed",
            status_code=response.status_code,
            url=url,
        )

    # ── Summoner API ───────────────────────────────────────────────────

    async def get_summoner_by_name(self, name: str) -> Dict[str, Any]:
        """
        Look up a summoner by display name on the platform host.

        Raises:
            NotFoundError: Riot knows no summoner with that name.
            UpstreamError: any other failure.
        """
        path = f"/lol/summoner/v4/summoners/by-name/{quote(name, safe='')}"
        try:
            data = await self._make_request(self.platform, path)
        except UpstreamError as exc:
            if exc.status_code == 404:
                raise NotFoundError(name) from exc
            raise
        if not isinstance(data, dict):
            raise UpstreamError("summoner payload is not an object", url=path)
        return data

    # ── Match API ──────────────────────────────────────────────────────

    async def get_match_ids_by_puuid(
        self,
        puuid: str,
        start: int = 0,
        count: int = 50,
    ) -> List[str]:
        """Up to ``count`` match ids, newest first, skipping the first ``start``."""
        path = f"/lol/match/v5/matches/by-puuid/{quote(puuid, safe='')}/ids"
        data = await self._make_request(self.regional, path, {"start": start, "count": count})
        if not isinstance(data, list) or not all(isinstance(m, str) for m in data):
            raise UpstreamError("match id payload is not a list of strings", url=path)
        return data

    async def get_match_by_id(self, match_id: str) -> Dict[str, Any]:
        data = await self._make_request(
            self.regional, f"/lol/match/v5/matches/{quote(match_id, safe='')}"
        )
        if not isinstance(data, dict):
            raise UpstreamError(f"match {match_id} payload is not an object")
        return data
