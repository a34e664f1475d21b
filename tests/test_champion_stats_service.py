import asyncio

import pytest

from application.services import ChampionStatsService, aggregate_champion_stats, sort_by_games
from application.use_cases import GetChampionStatsUseCase
from conftest import match_payload, participant_payload
from domain.entities import ChampionStats, Match, Summoner
from domain.interfaces import IMatchRepository, ISummonerRepository
from infrastructure.api import NotFoundError, UpstreamError

PUUID = "p-1"


def _match(match_id, *participants):
    return Match.from_api(match_payload(match_id, list(participants)))


AHRI_MATCHES = {
    "m1": _match("m1", participant_payload(PUUID, "Ahri", kills=5, deaths=0, assists=10, win=True),
                 participant_payload("p-2", "Garen", kills=3)),
    "m2": _match("m2", participant_payload("p-3", "Lux"),
                 participant_payload(PUUID, "Ahri", kills=1, deaths=2, assists=1, win=False)),
}


class FakeFetch:
    """Serves matches from a dict and tracks how many fetches overlap."""

    def __init__(self, matches, errors=None):
        self.matches = matches
        self.errors = errors or {}
        self.calls = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def __call__(self, match_id):
        self.calls.append(match_id)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(0)
            if match_id in self.errors:
                raise self.errors[match_id]
            return self.matches[match_id]
        finally:
            self.in_flight -= 1


class FakeMatchRepository(IMatchRepository):
    def __init__(self, matches, ids=None):
        self.fetch = FakeFetch(matches)
        self.ids = list(matches) if ids is None else ids
        self.listed = []

    async def get_match_ids(self, puuid, start=0, count=50):
        self.listed.append((puuid, start, count))
        return self.ids[start:start + count]

    async def get_match(self, match_id):
        return await self.fetch(match_id)


class FakeSummonerRepository(ISummonerRepository):
    def __init__(self, summoners):
        self.summoners = summoners

    async def get_summoner_by_name(self, summoner_name):
        if summoner_name not in self.summoners:
            raise NotFoundError(summoner_name)
        return self.summoners[summoner_name]


@pytest.mark.asyncio
async def test_aggregates_reference_example():
    stats = await aggregate_champion_stats(PUUID, ["m1", "m2"], FakeFetch(AHRI_MATCHES))

    assert list(stats) == ["Ahri"]
    assert stats["Ahri"].to_dict() == {
        "champion_name": "Ahri",
        "games": 2,
        "wins": 1,
        "losses": 1,
        "kills": 6,
        "deaths": 2,
        "assists": 11,
        "win_rate": "50.00%",
        "kda": "3.50",
    }


@pytest.mark.asyncio
async def test_no_matches_yields_empty_mapping():
    fetch = FakeFetch({})
    assert await aggregate_champion_stats(PUUID, [], fetch) == {}
    assert fetch.calls == []


@pytest.mark.asyncio
async def test_player_absent_from_every_match_yields_empty_mapping():
    stats = await aggregate_champion_stats("someone-else", ["m1", "m2"], FakeFetch(AHRI_MATCHES))
    assert stats == {}


@pytest.mark.asyncio
async def test_matches_without_player_are_skipped():
    matches = dict(AHRI_MATCHES)
    matches["m3"] = _match("m3", participant_payload("p-9", "Teemo"))

    stats = await aggregate_champion_stats(PUUID, ["m1", "m3", "m2"], FakeFetch(matches))

    assert stats["Ahri"].games == 2
    assert "Teemo" not in stats


@pytest.mark.asyncio
async def test_fetches_sequentially_in_listed_order():
    matches = {
        f"m{i}": _match(f"m{i}", participant_payload(PUUID, "Ahri" if i % 2 else "Zed", deaths=1))
        for i in range(6)
    }
    order = ["m5", "m0", "m3", "m1", "m4", "m2"]
    fetch = FakeFetch(matches)

    stats = await aggregate_champion_stats(PUUID, order, fetch)

    assert fetch.calls == order
    assert fetch.max_in_flight == 1
    assert stats["Ahri"].games == 3 and stats["Zed"].games == 3


@pytest.mark.asyncio
async def test_failing_fetch_propagates_same_error():
    error = UpstreamError("match unavailable", status_code=500)
    fetch = FakeFetch(AHRI_MATCHES, errors={"m2": error})

    with pytest.raises(UpstreamError) as excinfo:
        await aggregate_champion_stats(PUUID, ["m1", "m2", "m3"], fetch)

    assert excinfo.value is error
    assert fetch.calls == ["m1", "m2"]


@pytest.mark.asyncio
async def test_every_champion_is_finalized():
    matches = {
        "a": _match("a", participant_payload(PUUID, "Ahri", kills=2, deaths=1, win=True)),
        "b": _match("b", participant_payload(PUUID, "Lux", kills=0, deaths=0, assists=3)),
    }
    stats = await aggregate_champion_stats(PUUID, ["a", "b"], FakeFetch(matches))

    assert all(s.is_finalized for s in stats.values())
    assert stats["Lux"].kda == "Perfect"
    assert stats["Ahri"].win_rate == "100.00%"


def test_sort_by_games_descending_and_stable():
    stats = {}
    for name, games in [("Ahri", 2), ("Zed", 5), ("Lux", 2), ("Teemo", 1)]:
        stats[name] = ChampionStats(name, games=games)

    assert [s.champion_name for s in sort_by_games(stats)] == ["Zed", "Ahri", "Lux", "Teemo"]


@pytest.mark.asyncio
async def test_service_uses_configured_window():
    repo = FakeMatchRepository(AHRI_MATCHES)
    service = ChampionStatsService(repo, interval_ms=0, start=0, count=50)

    stats = await service.most_played_champions(PUUID)

    assert repo.listed == [(PUUID, 0, 50)]
    assert repo.fetch.calls == ["m1", "m2"]
    assert stats["Ahri"].games == 2


@pytest.mark.asyncio
async def test_service_spaces_match_fetches():
    interval_ms = 30
    matches = {f"m{i}": _match(f"m{i}", participant_payload(PUUID, "Ahri")) for i in range(3)}
    repo = FakeMatchRepository(matches)
    service = ChampionStatsService(repo, interval_ms=interval_ms)
    loop = asyncio.get_running_loop()

    start = loop.time()
    stats = await service.most_played_champions(PUUID)
    elapsed = loop.time() - start

    assert stats["Ahri"].games == 3
    # Three fetches -> two full intervals between their starts.
    assert elapsed >= 2 * interval_ms / 1000 - 0.01


def test_service_defaults_come_from_settings():
    from config import settings

    service = ChampionStatsService(FakeMatchRepository({}))
    assert service.interval_ms == settings.MATCH_FETCH_INTERVAL_MS
    assert (service.start, service.count) == (settings.MATCH_START, settings.MATCH_COUNT)


@pytest.mark.asyncio
async def test_use_case_builds_sorted_report():
    matches = dict(AHRI_MATCHES)
    matches["m3"] = _match("m3", participant_payload(PUUID, "Zed", kills=9, deaths=3, win=True))
    matches["m4"] = _match("m4", participant_payload(PUUID, "Ahri", kills=2, deaths=2))
    summoner = Summoner(puuid=PUUID, summoner_name="Hide on bush")
    use_case = GetChampionStatsUseCase(
        FakeSummonerRepository({"Hide on bush": summoner}),
        ChampionStatsService(FakeMatchRepository(matches), interval_ms=0),
    )

    report = await use_case.execute("Hide on bush")

    assert report.summoner is summoner
    assert [c.champion_name for c in report.champions] == ["Ahri", "Zed"]
    assert report.games == 4


@pytest.mark.asyncio
async def test_use_case_propagates_not_found():
    use_case = GetChampionStatsUseCase(
        FakeSummonerRepository({}),
        ChampionStatsService(FakeMatchRepository(AHRI_MATCHES), interval_ms=0),
    )

    with pytest.raises(NotFoundError):
        await use_case.execute("ghost")
