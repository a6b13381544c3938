import json
import logging
from typing import Any, List, Optional

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage

from match_predictor.prompts.prediction.v1 import SYSTEM_PROMPT, USER_PROMPT
from match_predictor.src.models.match import MatchContext
from match_predictor.src.utils.errors import PredictionResponseError
from match_predictor.src.utils.settings import LLMSettings, get_chat_model, get_setting

logger = logging.getLogger(__name__)


def _to_json(value: Any) -> str:
    return json.dumps(value, default=str)


def build_prediction_messages(context: MatchContext) -> List[BaseMessage]:
    return [
        SystemMessage(content=SYSTEM_PROMPT),
        HumanMessage(
            content=USER_PROMPT.format(
                team1_name=context.team1.name,
                team2_name=context.team2.name,
                team1_stats=_to_json(context.team1.stats),
                team2_stats=_to_json(context.team2.stats),
                head_to_head=_to_json(context.head_to_head),
                pre_match_news=_to_json(
                    [item.model_dump(mode="json") for item in context.pre_match_news]
                ),
                team1_season_stats=_to_json(context.season_stats.team1),
                team2_season_stats=_to_json(context.season_stats.team2),
            )
        ),
    ]


async def request_prediction(model: BaseChatModel, context: MatchContext) -> str:
    """Send the match context to the chat model and return its reply verbatim."""
    response = await model.ainvoke(build_prediction_messages(context))
    content = getattr(response, "content", None)
    if not isinstance(content, str) or not content.strip():
        raise PredictionResponseError(
            f"Unexpected response from the text-generation provider: {response!r}"
        )
    return content


def create_match_analyst(settings: Optional[LLMSettings] = None) -> BaseChatModel:
    settings = settings or get_setting(LLMSettings)
    logger.info(f"Using chat model {settings.llm_model_name}")
    return get_chat_model(settings)
