"""Terminal rendering for the three prediction output regions."""

import json
from typing import List

from match_predictor.src.models.match import SeasonStatistics
from match_predictor.src.models.sportmonks import SportmonksNewsItem

NEWS_HEADER = "Pre-Match News"
STATS_HEADER = "Season Statistics"


class PredictionDisplay:
    """Holds the prediction, news and statistics regions.

    Each ``show_*`` call replaces the region's whole content.
    """

    def __init__(self):
        self.prediction = ""
        self.news = ""
        self.stats = ""

    def show_prediction(self, text: str) -> None:
        self.prediction = text

    def clear_details(self) -> None:
        self.news = ""
        self.stats = ""

    def show_news(self, news: List[SportmonksNewsItem]) -> None:
        lines = [NEWS_HEADER]
        lines.extend(f"  - {item.title}" for item in news)
        self.news = "\n".join(lines)

    def show_stats(self, stats: SeasonStatistics) -> None:
        self.stats = "\n".join(
            [
                STATS_HEADER,
                f"  Team 1: {json.dumps(stats.team1, default=str)}",
                f"  Team 2: {json.dumps(stats.team2, default=str)}",
            ]
        )

    def render(self) -> str:
        sections = [self.prediction, self.news, self.stats]
        body = "\n\n".join(section for section in sections if section)
        return "\n" + "=" * 80 + "\n" + body + "\n" + "=" * 80 + "\n"
