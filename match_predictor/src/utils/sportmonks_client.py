"""Sportmonks API client for fetching football team, fixture and news data."""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from match_predictor.src.models.sportmonks import (
    SportmonksNewsItem,
    SportmonksNewsResponse,
    SportmonksResponse,
    SportmonksSeason,
    SportmonksSeasonsResponse,
    SportmonksTeam,
    SportmonksTeamDetailResponse,
    SportmonksTeamSearchResponse,
    TeamId,
)
from match_predictor.src.utils.cache_utils import ReferenceCache
from match_predictor.src.utils.match_mapper import (
    filter_pre_match_news,
    pick_first_match,
    select_current_season,
)
from match_predictor.src.utils.pacer import RequestPacer
from match_predictor.src.utils.settings import SportmonksSettings

logger = logging.getLogger(__name__)


def _is_retryable(exc: BaseException) -> bool:
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code == 429 or exc.response.status_code >= 500
    return isinstance(exc, httpx.TransportError)


class SportmonksClient:
    """Client for the Sportmonks football API.

    Every call is queued on the request pacer, so at most one request is in
    flight and call starts are spaced by ``rate_window / rate_limit``.
    """

    def __init__(
        self,
        settings: SportmonksSettings,
        http_client: Optional[httpx.AsyncClient] = None,
        cache: Optional[ReferenceCache] = None,
    ):
        self.settings = settings
        self.base_url = settings.sportmonks_base_url.rstrip("/")
        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(timeout=settings.timeout)
        self.cache = cache if cache is not None else ReferenceCache(settings.reference_cache_ttl)
        self.pacer = RequestPacer(
            self._request, rate=settings.rate_limit, window=settings.rate_window
        )

    async def __aenter__(self) -> "SportmonksClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.pacer.aclose()
        if self._owns_http_client:
            await self._http_client.aclose()

    def _make_retry_decorator(self):
        """Create retry decorator with configured settings."""
        return retry(
            retry=retry_if_exception(_is_retryable),
            stop=stop_after_attempt(self.settings.max_attempts),
            wait=wait_exponential(multiplier=self.settings.backoff_multiplier, min=1, max=10),
            reraise=True,
        )

    async def _request(
        self, endpoint: str, params: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        query = {"api_token": self.settings.sportmonks_api_token.get_secret_value()}
        query.update(params or {})
        response = await self._http_client.get(f"{self.base_url}/{endpoint}", params=query)
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            # the default message carries the full url, api token included
            safe_url = e.request.url.copy_remove_param("api_token")
            raise httpx.HTTPStatusError(
                f"{response.status_code} {response.reason_phrase} for url '{safe_url}'",
                request=e.request,
                response=response,
            ) from None
        return response.json()

    async def _get(
        self, endpoint: str, params: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """Make a paced request; a retried call goes to the back of the queue."""

        @self._make_retry_decorator()
        async def _paced_request():
            return await self.pacer.fetch(endpoint, params)

        return await _paced_request()

    # ========================================================================
    # Reference data (cached for the session)
    # ========================================================================

    async def get_types(self) -> Any:
        async def _load():
            return SportmonksResponse(**await self._get("types")).data

        return await self.cache.get_or_fetch("types", _load)

    async def get_states(self) -> Any:
        async def _load():
            return SportmonksResponse(**await self._get("states")).data

        return await self.cache.get_or_fetch("states", _load)

    async def get_seasons(self) -> List[SportmonksSeason]:
        async def _load():
            return SportmonksSeasonsResponse(**await self._get("seasons")).data

        return await self.cache.get_or_fetch("seasons", _load)

    async def populate_reference_cache(self) -> None:
        await self.get_types()
        await self.get_states()
        await self.get_seasons()

    async def get_current_season_id(self) -> TeamId:
        return select_current_season(await self.get_seasons())

    # ========================================================================
    # Teams, fixtures and news
    # ========================================================================

    async def search_teams(self, team_name: str) -> List[SportmonksTeam]:
        """
        Search teams by name.

        Endpoint: /teams/search/{name}

        Returns:
            Every candidate in provider order
        """
        data = await self._get(f"teams/search/{quote(team_name, safe='')}")
        return SportmonksTeamSearchResponse(**data).data

    async def get_team_id(self, team_name: str) -> TeamId:
        candidates = await self.search_teams(team_name)
        return pick_first_match(team_name, candidates).id

    async def get_team_stats(self, team_id: TeamId) -> Any:
        """
        Fetch a team's statistics.

        Endpoint: /teams/{team_id}?include=stats
        """
        data = await self._get(f"teams/{team_id}", {"include": "stats"})
        return SportmonksTeamDetailResponse(**data).data.stats

    async def get_head_to_head(self, team1_id: TeamId, team2_id: TeamId) -> Any:
        data = await self._get(f"fixtures/head-to-head/{team1_id}/{team2_id}")
        return SportmonksResponse(**data).data

    async def get_pre_match_news(
        self, team1_id: TeamId, team2_id: TeamId
    ) -> List[SportmonksNewsItem]:
        """
        Fetch pre-match news and keep the items about this fixture.

        Endpoint: /news/pre-match?include=fixture

        The provider returns news for every upcoming fixture; the filtering to
        this pair (either order) happens here.
        """
        data = await self._get("news/pre-match", {"include": "fixture"})
        news = SportmonksNewsResponse(**data).data
        return filter_pre_match_news(news, team1_id, team2_id)

    async def get_season_statistics(self, team_id: TeamId, season_id: TeamId) -> Any:
        data = await self._get(f"statistics/seasons/teams/{team_id}/{season_id}")
        return SportmonksResponse(**data).data
