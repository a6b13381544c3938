import logging
from typing import Callable, Optional

from langchain_core.language_models.chat_models import BaseChatModel

from match_predictor.src.agents.match_analyst import create_match_analyst, request_prediction
from match_predictor.src.models.match import MatchContext, Prediction
from match_predictor.src.tools import fetch_match_context
from match_predictor.src.utils.errors import PredictionInProgressError
from match_predictor.src.utils.settings import LLMSettings, SportmonksSettings, get_setting
from match_predictor.src.utils.sportmonks_client import SportmonksClient

logger = logging.getLogger(__name__)


class MatchPredictor:
    """One prediction session.

    Owns the statistics client (with its pacer and reference cache) and the
    chat model. Only one prediction may run at a time; a second call while one
    is outstanding is rejected.
    """

    def __init__(self, client: SportmonksClient, chat_model: BaseChatModel):
        self.client = client
        self.chat_model = chat_model
        self._in_progress = False

    @classmethod
    def from_settings(
        cls,
        sportmonks_settings: Optional[SportmonksSettings] = None,
        llm_settings: Optional[LLMSettings] = None,
    ) -> "MatchPredictor":
        client = SportmonksClient(sportmonks_settings or get_setting(SportmonksSettings))
        return cls(client, create_match_analyst(llm_settings))

    async def __aenter__(self) -> "MatchPredictor":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.client.aclose()

    @property
    def in_progress(self) -> bool:
        return self._in_progress

    async def predict(
        self,
        team1_name: str,
        team2_name: str,
        on_context: Optional[Callable[[MatchContext], None]] = None,
    ) -> Prediction:
        """Build the match context and ask the chat model for a prediction.

        ``on_context`` is called with the context before the chat model is
        queried, so news and statistics can be shown while waiting.
        """
        if self._in_progress:
            raise PredictionInProgressError()
        self._in_progress = True
        try:
            logger.info(f"Predicting {team1_name} vs {team2_name}")
            context = await fetch_match_context(self.client, team1_name, team2_name)
            if on_context is not None:
                on_context(context)
            text = await request_prediction(self.chat_model, context)
            return Prediction(context=context, text=text)
        finally:
            self._in_progress = False
