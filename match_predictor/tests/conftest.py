from pathlib import Path
from typing import List

import httpx
from dotenv import load_dotenv
from pytest import fixture

from match_predictor.src.utils.settings import SportmonksSettings
from match_predictor.src.utils.sportmonks_client import SportmonksClient

project_root = Path(__file__).parent.parent.parent
load_dotenv(project_root / ".env")

BASE_URL = "https://api.sportmonks.test/v3/football"
PATH_PREFIX = "/v3/football/"

ARSENAL_STATS = [{"type_id": 52, "value": {"total": 88}}]
CHELSEA_STATS = [{"type_id": 52, "value": {"total": 77}}]
ARSENAL_SEASON_STATS = {"team_id": 1, "season_id": 2024, "wins": 28}
CHELSEA_SEASON_STATS = {"team_id": 2, "season_id": 2024, "wins": 18}


def sportmonks_routes() -> dict:
    return {
        "types": {"data": [{"id": 52, "name": "Goals"}]},
        "states": {"data": [{"id": 1, "state": "NS", "name": "Not Started"}]},
        "seasons": {
            "data": [
                {"id": 2023, "name": "2022/2023", "is_current": False},
                {"id": 2024, "name": "2023/2024", "is_current": True},
            ]
        },
        "teams/search/Arsenal": {"data": [{"id": 1, "name": "Arsenal"}]},
        "teams/search/Chelsea": {"data": [{"id": 2, "name": "Chelsea"}]},
        "teams/1": {"data": {"id": 1, "name": "Arsenal", "stats": ARSENAL_STATS}},
        "teams/2": {"data": {"id": 2, "name": "Chelsea", "stats": CHELSEA_STATS}},
        "fixtures/head-to-head/1/2": {
            "data": [{"id": 900, "name": "Arsenal vs Chelsea", "result_info": "2-2"}]
        },
        "news/pre-match": {
            "data": [
                {
                    "id": 10,
                    "title": "Arsenal welcome Chelsea",
                    "fixture": {"localteam_id": 1, "visitorteam_id": 2},
                },
                {
                    "id": 11,
                    "title": "Liverpool travel to Everton",
                    "fixture": {"localteam_id": 3, "visitorteam_id": 4},
                },
                {
                    "id": 12,
                    "title": "Chelsea injury update before Arsenal trip",
                    "fixture": {"localteam_id": 2, "visitorteam_id": 1},
                },
            ]
        },
        "statistics/seasons/teams/1/2024": {"data": ARSENAL_SEASON_STATS},
        "statistics/seasons/teams/2/2024": {"data": CHELSEA_SEASON_STATS},
    }


class FakeSportmonks:
    """Routes requests by path and records every request it receives."""

    def __init__(self, routes: dict):
        self.routes = routes
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path[len(PATH_PREFIX):]
        if path not in self.routes:
            return httpx.Response(404, json={"message": "Not found"})
        route = self.routes[path]
        if isinstance(route, httpx.Response):
            return route
        return httpx.Response(200, json=route)

    @property
    def paths(self) -> List[str]:
        return [request.url.path[len(PATH_PREFIX):] for request in self.requests]


@fixture
def fake_sportmonks() -> FakeSportmonks:
    return FakeSportmonks(sportmonks_routes())


@fixture
def sportmonks_settings() -> SportmonksSettings:
    return SportmonksSettings(
        SPORTMONKS_API_TOKEN="test-token",
        sportmonks_base_url=BASE_URL,
        rate_limit=1000,
        rate_window=1.0,
        max_attempts=1,
    )


@fixture
def sportmonks_client(fake_sportmonks, sportmonks_settings) -> SportmonksClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(fake_sportmonks))
    return SportmonksClient(sportmonks_settings, http_client=http_client)
