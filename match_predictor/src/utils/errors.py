"""Exceptions raised while building a match prediction."""


class MatchPredictorError(Exception):
    """Base class for prediction failures raised by this package."""


class TeamNotFoundError(MatchPredictorError):
    def __init__(self, team_name: str):
        super().__init__(f"Team '{team_name}' not found")
        self.team_name = team_name


class SeasonNotFoundError(MatchPredictorError):
    """No season in the season list is flagged as current."""


class PredictionResponseError(MatchPredictorError):
    """The text-generation provider answered with an unexpected shape."""


class PredictionInProgressError(MatchPredictorError):
    def __init__(self):
        super().__init__("A prediction is already in progress")
