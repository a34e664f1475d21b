"""Errors raised by the Riot API client."""
from __future__ import annotations

from typing import Optional


class RiotAPIError(Exception):
    """Base class for everything the API layer raises."""


class NotFoundError(RiotAPIError):
    """The queried player does not exist upstream."""

    def __init__(self, name: str) -> None:
        super().__init__(f"summoner '{name}' not found")
        self.name = name


class UpstreamError(RiotAPIError):
    """Non-success response, malformed payload, or transport failure."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        url: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url

    def __str__(self) -> str:
        msg = super().__str__()
        if self.status_code is not None:
            msg = f"{msg} (HTTP {self.status_code})"
        return msg
