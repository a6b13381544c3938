import logging
from typing import List

from match_predictor.src.models.sportmonks import (
    SportmonksNewsItem,
    SportmonksSeason,
    SportmonksTeam,
    TeamId,
)
from match_predictor.src.utils.errors import SeasonNotFoundError, TeamNotFoundError

logger = logging.getLogger(__name__)


def pick_first_match(team_name: str, candidates: List[SportmonksTeam]) -> SportmonksTeam:
    """First-match rule: the first search result is taken as the team.

    Ambiguous names are not disambiguated, the extra candidates are only logged.
    """
    if not candidates:
        raise TeamNotFoundError(team_name)
    if len(candidates) > 1:
        logger.warning(
            f"'{team_name}' matched {len(candidates)} teams, using "
            f"{candidates[0].name or candidates[0].id}"
        )
    return candidates[0]


def select_current_season(seasons: List[SportmonksSeason]) -> TeamId:
    current = [season for season in seasons if season.is_current]
    if not current:
        raise SeasonNotFoundError("No season is flagged as current")
    if len(current) > 1:
        # one current season per league, so several flags are normal
        logger.info(
            f"{len(current)} seasons flagged as current, using season {current[0].id}"
        )
    return current[0].id


def filter_pre_match_news(
    news: List[SportmonksNewsItem], team1_id: TeamId, team2_id: TeamId
) -> List[SportmonksNewsItem]:
    return [
        item
        for item in news
        if item.fixture is not None and item.fixture.is_between(team1_id, team2_id)
    ]
