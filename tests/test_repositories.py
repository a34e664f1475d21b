import pytest

from conftest import json_response, make_handler
from infrastructure import MatchRepository, NotFoundError, RiotAPIClient, SummonerRepository, UpstreamError


@pytest.mark.asyncio
async def test_summoner_repository_returns_entity(api_config, ahri_history):
    async with RiotAPIClient(api_config, transport=ahri_history.transport) as api:
        summoner = await SummonerRepository(api).get_summoner_by_name("Hide on bush")

    assert summoner.puuid == "p-1"
    assert summoner.summoner_id == "sid-p-1"


@pytest.mark.asyncio
async def test_summoner_repository_propagates_not_found(api_config, fake_riot):
    async with RiotAPIClient(api_config, transport=fake_riot.transport) as api:
        with pytest.raises(NotFoundError):
            await SummonerRepository(api).get_summoner_by_name("ghost")


@pytest.mark.asyncio
async def test_summoner_payload_without_puuid_is_upstream_error(api_config):
    transport = make_handler(lambda request: json_response({"name": "no-puuid"}))

    async with RiotAPIClient(api_config, transport=transport) as api:
        with pytest.raises(UpstreamError, match="malformed"):
            await SummonerRepository(api).get_summoner_by_name("no-puuid")


@pytest.mark.asyncio
async def test_match_repository_lists_and_parses(api_config, ahri_history):
    async with RiotAPIClient(api_config, transport=ahri_history.transport) as api:
        repo = MatchRepository(api)
        ids = await repo.get_match_ids("p-1", start=0, count=50)
        match = await repo.get_match(ids[0])

    assert ids == ["EUW1_1", "EUW1_2"]
    assert match.match_id == "EUW1_1"
    assert match.find_participant("p-1").champion_name == "Ahri"


@pytest.mark.asyncio
async def test_malformed_match_payload_is_upstream_error(api_config):
    transport = make_handler(lambda request: json_response({"metadata": {"matchId": "EUW1_1"}}))

    async with RiotAPIClient(api_config, transport=transport) as api:
        with pytest.raises(UpstreamError, match="EUW1_1"):
            await MatchRepository(api).get_match("EUW1_1")


@pytest.mark.asyncio
async def test_participant_without_champion_is_upstream_error(api_config):
    payload = {"metadata": {"matchId": "EUW1_1"}, "info": {"participants": [{"puuid": "p-1"}]}}
    transport = make_handler(lambda request: json_response(payload))

    async with RiotAPIClient(api_config, transport=transport) as api:
        with pytest.raises(UpstreamError):
            await MatchRepository(api).get_match("EUW1_1")
