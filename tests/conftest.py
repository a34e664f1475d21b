"""Shared fixtures: a fake Riot backend served through ``httpx.MockTransport``."""
from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

from config import APIConfig

API_KEY = "RGAPI-test-key"
PLATFORM = "https://euw1.api.riotgames.com"
REGIONAL = "https://europe.api.riotgames.com"


def participant_payload(
    puuid: str,
    champion: str,
    kills: int = 0,
    deaths: int = 0,
    assists: int = 0,
    win: bool = False,
    **extra: Any,
) -> Dict[str, Any]:
    return {
        "puuid": puuid,
        "championName": champion,
        "championId": extra.pop("championId", 103),
        "teamId": extra.pop("teamId", 100),
        "kills": kills,
        "deaths": deaths,
        "assists": assists,
        "win": win,
        **extra,
    }


def match_payload(match_id: str, participants: List[Dict[str, Any]], **info: Any) -> Dict[str, Any]:
    return {
        "metadata": {"matchId": match_id, "participants": [p["puuid"] for p in participants]},
        "info": {
            "gameMode": info.get("gameMode", "CLASSIC"),
            "queueId": info.get("queueId", 420),
            "gameDuration": info.get("gameDuration", 1800),
            "gameVersion": info.get("gameVersion", "14.3.555.1234"),
            "participants": participants,
        },
    }


class FakeRiot:
    """Minimal stand-in for the summoner-v4 and match-v5 endpoints.

    ``failures`` maps a request path to a status code (or an exception
    instance) returned instead of the normal payload.
    """

    def __init__(self) -> None:
        self.summoners: Dict[str, Dict[str, Any]] = {}
        self.match_ids: Dict[str, List[str]] = {}
        self.matches: Dict[str, Dict[str, Any]] = {}
        self.failures: Dict[str, Any] = {}
        self.requests: List[httpx.Request] = []

    def add_summoner(self, name: str, puuid: str, **fields: Any) -> None:
        self.summoners[name] = {
            "id": fields.get("id", f"sid-{puuid}"),
            "accountId": fields.get("accountId", f"aid-{puuid}"),
            "puuid": puuid,
            "name": name,
            "profileIconId": fields.get("profileIconId", 1),
            "summonerLevel": fields.get("summonerLevel", 30),
        }

    def add_match(self, puuid: str, payload: Dict[str, Any]) -> None:
        match_id = payload["metadata"]["matchId"]
        self.matches[match_id] = payload
        self.match_ids.setdefault(puuid, []).append(match_id)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        failure = self.failures.get(path)
        if isinstance(failure, Exception):
            raise failure
        if failure is not None:
            return httpx.Response(failure, json={"status": {"status_code": failure}})

        if path.startswith("/lol/summoner/v4/summoners/by-name/"):
            name = path.rsplit("/", 1)[-1]
            if name in self.summoners:
                return httpx.Response(200, json=self.summoners[name])
            return httpx.Response(404, json={"status": {"message": "Data not found"}})

        if path.startswith("/lol/match/v5/matches/by-puuid/"):
            puuid = path.split("/")[-2]
            start = int(request.url.params.get("start", 0))
            count = int(request.url.params.get("count", 20))
            return httpx.Response(200, json=self.match_ids.get(puuid, [])[start:start + count])

        if path.startswith("/lol/match/v5/matches/"):
            match_id = path.rsplit("/", 1)[-1]
            if match_id in self.matches:
                return httpx.Response(200, json=self.matches[match_id])
            return httpx.Response(404, json={"status": {"message": "Data not found"}})

        return httpx.Response(404)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def paths(self) -> List[str]:
        return [r.url.path for r in self.requests]


@pytest.fixture
def api_config() -> APIConfig:
    return APIConfig(
        api_key=API_KEY,
        platform_base_url=PLATFORM,
        regional_base_url=REGIONAL,
        timeout=5.0,
    )


@pytest.fixture
def fake_riot() -> FakeRiot:
    return FakeRiot()


@pytest.fixture
def ahri_history(fake_riot: FakeRiot) -> FakeRiot:
    """Two Ahri games for 'Hide on bush' (puuid p-1), as in the reference example."""
    fake_riot.add_summoner("Hide on bush", "p-1")
    others = [participant_payload(f"other-{i}", "Garen", kills=1) for i in range(3)]
    fake_riot.add_match("p-1", match_payload("EUW1_1", [
        participant_payload("p-1", "Ahri", kills=5, deaths=0, assists=10, win=True), *others,
    ]))
    fake_riot.add_match("p-1", match_payload("EUW1_2", [
        *others, participant_payload("p-1", "Ahri", kills=1, deaths=2, assists=1, win=False),
    ]))
    return fake_riot


def make_handler(fn: Callable[[httpx.Request], httpx.Response]) -> httpx.MockTransport:
    return httpx.MockTransport(fn)


def json_response(data: Any, status: int = 200, headers: Optional[Dict[str, str]] = None) -> httpx.Response:
    return httpx.Response(status, json=data, headers=headers)
