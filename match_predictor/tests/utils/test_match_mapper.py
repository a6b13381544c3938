import pytest

from match_predictor.src.models.sportmonks import (
    SportmonksNewsItem,
    SportmonksSeason,
    SportmonksTeam,
)
from match_predictor.src.utils import match_mapper
from match_predictor.src.utils.errors import SeasonNotFoundError, TeamNotFoundError


def _news(title, local_id=None, visitor_id=None):
    fixture = None
    if local_id is not None:
        fixture = {"localteam_id": local_id, "visitorteam_id": visitor_id}
    return SportmonksNewsItem(title=title, fixture=fixture)


def test_pick_first_match_takes_first_candidate():
    candidates = [
        SportmonksTeam(id=1, name="Arsenal"),
        SportmonksTeam(id=9, name="Arsenal Tula"),
    ]
    assert match_mapper.pick_first_match("Arsenal", candidates).id == 1


def test_pick_first_match_without_candidates():
    with pytest.raises(TeamNotFoundError, match="Nowhere FC"):
        match_mapper.pick_first_match("Nowhere FC", [])


def test_select_current_season_single_flag():
    seasons = [
        SportmonksSeason(id=2022, is_current=False),
        SportmonksSeason(id=2023, is_current=True),
        SportmonksSeason(id=2021),
    ]
    assert match_mapper.select_current_season(seasons) == 2023


def test_select_current_season_none_flagged():
    with pytest.raises(SeasonNotFoundError):
        match_mapper.select_current_season([SportmonksSeason(id=2022)])

    with pytest.raises(SeasonNotFoundError):
        match_mapper.select_current_season([])


def test_select_current_season_several_flags_takes_first():
    seasons = [
        SportmonksSeason(id=10, is_current=False),
        SportmonksSeason(id=11, is_current=True),
        SportmonksSeason(id=12, is_current=True),
    ]
    assert match_mapper.select_current_season(seasons) == 11


def test_filter_pre_match_news_either_order():
    news = [
        _news("home", 1, 2),
        _news("away", 2, 1),
        _news("other fixture", 3, 4),
        _news("half match", 1, 3),
        _news("no fixture"),
    ]

    filtered = match_mapper.filter_pre_match_news(news, 1, 2)

    assert [item.title for item in filtered] == ["home", "away"]


def test_filter_pre_match_news_unrelated_only():
    news = [_news("a", 5, 6), _news("b", 7, 8)]
    assert match_mapper.filter_pre_match_news(news, 1, 2) == []


def test_filter_pre_match_news_same_team_twice_is_not_a_match():
    news = [_news("derby of one", 1, 1)]
    assert match_mapper.filter_pre_match_news(news, 1, 2) == []
