from pydantic_settings import BaseSettings as PydanticBaseSettings
from pydantic import SecretStr, Field
from typing import Optional, TypeVar, Type
from functools import lru_cache

from langchain_openai import ChatOpenAI

TypeSetting = TypeVar("TypeSetting", bound=PydanticBaseSettings)


class SportmonksSettings(PydanticBaseSettings):
    sportmonks_base_url: str = "https://api.sportmonks.com/v3/football"
    timeout: float = 10.0

    # 180 calls per 1 second window -> one call start every ~5.6ms
    rate_limit: int = 180
    rate_window: float = 1.0

    # 1 means a failed call is surfaced straight away
    max_attempts: int = 1
    backoff_multiplier: float = 1.0

    # None keeps the reference data for the whole session
    reference_cache_ttl: Optional[float] = None

    sportmonks_api_token: SecretStr = Field(
        ..., exclude=True, validation_alias="SPORTMONKS_API_TOKEN"
    )

    model_config = {
        "extra": "ignore",
    }


class LLMSettings(PydanticBaseSettings):
    llm_model_name: str = "gpt-3.5-turbo"
    temperature: float = 0.7
    llm_timeout: float = 60.0

    llm_api_key: SecretStr = Field(..., exclude=True, validation_alias="OPENAI_API_KEY")

    model_config = {
        "extra": "ignore",
    }


class AppSettings(PydanticBaseSettings):
    log_level: str = "INFO"

    model_config = {
        "extra": "ignore",
    }


@lru_cache
def get_setting(setting_class: Type[TypeSetting]) -> TypeSetting:
    """helper to cache the PydanticSettings classes"""
    return setting_class()


def get_chat_model(settings: LLMSettings) -> ChatOpenAI:
    return ChatOpenAI(
        model=settings.llm_model_name,
        temperature=settings.temperature,
        api_key=settings.llm_api_key,
        timeout=settings.llm_timeout,
    )
