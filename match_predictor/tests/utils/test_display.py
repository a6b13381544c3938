from match_predictor.src.models.match import SeasonStatistics
from match_predictor.src.models.sportmonks import SportmonksNewsItem
from match_predictor.src.utils.display import PredictionDisplay


def test_show_news_replaces_region():
    display = PredictionDisplay()
    display.show_news([SportmonksNewsItem(title="old")])
    display.show_news([SportmonksNewsItem(title="a"), SportmonksNewsItem(title="b")])

    assert display.news == "Pre-Match News\n  - a\n  - b"


def test_show_news_empty_keeps_header():
    display = PredictionDisplay()
    display.show_news([])
    assert display.news == "Pre-Match News"


def test_show_stats():
    display = PredictionDisplay()
    display.show_stats(SeasonStatistics(season_id=1, team1={"wins": 3}, team2=None))

    assert display.stats == 'Season Statistics\n  Team 1: {"wins": 3}\n  Team 2: null'


def test_render_skips_empty_regions():
    display = PredictionDisplay()
    display.show_prediction("Draw")

    rendered = display.render()

    assert "Draw" in rendered
    assert "Pre-Match News" not in rendered


def test_clear_details():
    display = PredictionDisplay()
    display.news, display.stats = "n", "s"
    display.clear_details()
    assert (display.news, display.stats) == ("", "")
