from typing import Any, List
from pydantic import BaseModel, ConfigDict, Field

from match_predictor.src.models.sportmonks import SportmonksNewsItem, TeamId


class Team(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(description="team name as typed by the user")
    id: TeamId = Field(description="identifier resolved by the statistics provider")
    stats: Any = Field(default=None, description="opaque statistics payload")


class SeasonStatistics(BaseModel):
    model_config = ConfigDict(frozen=True)

    season_id: TeamId
    team1: Any
    team2: Any


class MatchContext(BaseModel):
    """Everything fetched for one prediction request."""

    model_config = ConfigDict(frozen=True)

    team1: Team
    team2: Team
    head_to_head: Any
    pre_match_news: List[SportmonksNewsItem] = Field(default_factory=list)
    season_stats: SeasonStatistics


class Prediction(BaseModel):
    model_config = ConfigDict(frozen=True)

    context: MatchContext
    text: str
