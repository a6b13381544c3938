"""Pydantic models for Sportmonks football API responses.

Only the fields the prediction flow reads are declared; everything else the
provider sends is kept as extra data and passed through untouched.
"""

from typing import Any, List, Optional, Union
from pydantic import BaseModel, ConfigDict

TeamId = Union[int, str]


class SportmonksResponse(BaseModel):
    """Envelope shared by every endpoint: the payload lives under ``data``."""

    model_config = ConfigDict(extra="ignore")

    data: Any


class SportmonksTeam(BaseModel):
    """Team search result."""

    model_config = ConfigDict(extra="allow")

    id: TeamId
    name: Optional[str] = None


class SportmonksTeamDetail(BaseModel):
    """Team detail requested with ``include=stats``."""

    model_config = ConfigDict(extra="allow")

    id: TeamId
    stats: Any


class SportmonksSeason(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: TeamId
    name: Optional[str] = None
    is_current: bool = False


class SportmonksNewsFixture(BaseModel):
    model_config = ConfigDict(extra="allow")

    localteam_id: Optional[TeamId] = None
    visitorteam_id: Optional[TeamId] = None

    def is_between(self, team1_id: TeamId, team2_id: TeamId) -> bool:
        return (self.localteam_id, self.visitorteam_id) in (
            (team1_id, team2_id),
            (team2_id, team1_id),
        )


class SportmonksNewsItem(BaseModel):
    """Pre-match news article requested with ``include=fixture``."""

    model_config = ConfigDict(extra="allow")

    title: str
    fixture: Optional[SportmonksNewsFixture] = None


class SportmonksTeamSearchResponse(SportmonksResponse):
    data: List[SportmonksTeam]


class SportmonksTeamDetailResponse(SportmonksResponse):
    data: SportmonksTeamDetail


class SportmonksSeasonsResponse(SportmonksResponse):
    data: List[SportmonksSeason]


class SportmonksNewsResponse(SportmonksResponse):
    data: List[SportmonksNewsItem]
