"""Application settings and configuration."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from domain.enums import Region

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)


def _int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


@dataclass(frozen=True)
class APIConfig:
    """Connection settings handed to the Riot API client.

    Built once at startup and never mutated. The key is excluded from
    ``repr`` so it can't leak into logs or tracebacks.
    """

    api_key: str = field(repr=False)
    platform_base_url: str
    regional_base_url: str
    timeout: float = 30.0

    @classmethod
    def for_region(cls, api_key: str, region: Region, timeout: float = 30.0) -> "APIConfig":
        return cls(
            api_key=api_key,
            platform_base_url=f"https://{region.platform_route}.api.riotgames.com",
            regional_base_url=f"https://{region.regional_route}.api.riotgames.com",
            timeout=timeout,
        )


class Settings:
    """
    Process-wide settings, read from the environment (and ``config/.env``).

    ─── RIOT LIMITS ─────────────────────────────────────────────────────
    Personal keys: 20 requests / 1 s and 100 requests / 120 s, enforced
    per routing value (euw1, europe, ...). Match details are fetched one
    at a time with MATCH_FETCH_INTERVAL_MS between call starts; validate()
    rejects an interval and match count that could exceed either limit.
    ──────────────────────────────────────────────────────────────────────
    """

    RIOT_API_KEY: str = os.getenv('RIOT_KEY') or os.getenv('RIOT_API_KEY', '')

    # ── Routing ────────────────────────────────────────────────────────────
    RIOT_REGION: str = os.getenv('RIOT_REGION', 'euw1').strip().lower()
    RIOT_API_BASE_URL: Optional[str] = os.getenv('RIOT_API_BASE_URL') or None
    RIOT_API_EUROPE_BASE_URL: Optional[str] = os.getenv('RIOT_API_EUROPE_BASE_URL') or None

    # ── Documented upstream limits ─────────────────────────────────────────
    RATE_LIMIT_PER_1_SEC: int = 20
    RATE_LIMIT_PER_2_MIN: int = 100

    # ── Match history ──────────────────────────────────────────────────────
    MATCH_FETCH_INTERVAL_MS: int = _int('MATCH_FETCH_INTERVAL_MS', 500)
    MATCH_START:             int = _int('MATCH_START', 0)
    MATCH_COUNT:             int = _int('MATCH_COUNT', 50)

    # ── HTTP ───────────────────────────────────────────────────────────────
    REQUEST_TIMEOUT: int = _int('REQUEST_TIMEOUT', 30)

    # ── Paths / logging ────────────────────────────────────────────────────
    BASE_DIR: Path = Path(__file__).resolve().parent.parent
    LOG_DIR:  Path = BASE_DIR / 'data' / 'logs'
    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    @property
    def region(self) -> Region:
        try:
            return Region(self.RIOT_REGION)
        except ValueError:
            raise ValueError(f"Unknown RIOT_REGION '{self.RIOT_REGION}'") from None

    def validate(self) -> None:
        if not self.RIOT_API_KEY:
            raise ValueError("RIOT_KEY must be set in the environment or config/.env")
        # Raises on an unknown platform code.
        self.region
        self.check_rate_limits()

    def peak_requests(self, window_ms: int) -> int:
        """Most requests one run can send inside any ``window_ms`` window."""
        # Summoner and match-id lookups go out back to back, unthrottled.
        if self.MATCH_FETCH_INTERVAL_MS <= 0:
            return 2 + self.MATCH_COUNT
        return 2 + min(self.MATCH_COUNT, window_ms // self.MATCH_FETCH_INTERVAL_MS + 1)

    def check_rate_limits(self) -> None:
        if self.MATCH_FETCH_INTERVAL_MS < 0:
            raise ValueError("MATCH_FETCH_INTERVAL_MS must be >= 0")
        if not 0 <= self.MATCH_COUNT <= 100:
            raise ValueError("MATCH_COUNT must be between 0 and 100")
        for window_ms, limit in ((1_000, self.RATE_LIMIT_PER_1_SEC), (120_000, self.RATE_LIMIT_PER_2_MIN)):
            peak = self.peak_requests(window_ms)
            if peak > limit:
                raise ValueError(
                    f"MATCH_FETCH_INTERVAL_MS={self.MATCH_FETCH_INTERVAL_MS} with MATCH_COUNT={self.MATCH_COUNT} "
                    f"sends up to {peak} requests per {window_ms // 1000}s (limit {limit})"
                )

    def api_config(self) -> APIConfig:
        """Build the immutable client configuration from these settings."""
        config = APIConfig.for_region(
            self.RIOT_API_KEY, self.region, timeout=float(self.REQUEST_TIMEOUT)
        )
        return APIConfig(
            api_key=config.api_key,
            platform_base_url=(self.RIOT_API_BASE_URL or config.platform_base_url).rstrip('/'),
            regional_base_url=(self.RIOT_API_EUROPE_BASE_URL or config.regional_base_url).rstrip('/'),
            timeout=config.timeout,
        )

    def create_directories(self) -> None:
        self.LOG_DIR.mkdir(parents=True, exist_ok=True)


settings = Settings()
