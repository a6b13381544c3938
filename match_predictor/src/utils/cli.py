"""CLI utilities for match prediction interaction."""

import logging
from typing import Tuple

from match_predictor.src.agents.match_predictor import MatchPredictor
from match_predictor.src.utils.display import PredictionDisplay

logger = logging.getLogger(__name__)

MISSING_INPUT_MESSAGE = "Please enter both team names."
LOADING_MESSAGE = "Loading prediction..."
ERROR_MESSAGE = "An error occurred while fetching the prediction."
IN_PROGRESS_MESSAGE = "A prediction is already in progress."


def prompt_team_names() -> Tuple[str, str]:
    team1 = input("Team 1: ").strip()
    team2 = input("Team 2: ").strip()
    return team1, team2


async def run_prediction(
    predictor: MatchPredictor, display: PredictionDisplay, team1: str, team2: str
) -> None:
    """
    Run one prediction and write the outcome into the display regions.

    Blank input never reaches the network. Any failure along the way ends up
    as the same generic message; the details go to the log.

    Args:
        predictor: MatchPredictor session
        display: PredictionDisplay to update
        team1: first team name as typed
        team2: second team name as typed
    """
    team1, team2 = (team1 or "").strip(), (team2 or "").strip()
    if not team1 or not team2:
        display.show_prediction(MISSING_INPUT_MESSAGE)
        return

    if predictor.in_progress:
        display.show_prediction(IN_PROGRESS_MESSAGE)
        return

    display.show_prediction(LOADING_MESSAGE)
    display.clear_details()

    def show_context(context):
        display.show_news(context.pre_match_news)
        display.show_stats(context.season_stats)

    try:
        prediction = await predictor.predict(team1, team2, on_context=show_context)
    except Exception:
        logger.exception(f"Prediction for {team1} vs {team2} failed")
        display.show_prediction(ERROR_MESSAGE)
    else:
        display.show_prediction(prediction.text)
