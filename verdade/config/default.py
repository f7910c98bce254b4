"""
default configuration factories.

every setting comes from the environment so the same image runs locally and
in production. the chat models all go through the OpenRouter gateway, which
speaks the OpenAI chat completions protocol.
"""

import os
from typing import Optional

from langchain_openai import ChatOpenAI

from verdade.models.config import FeedSettings, GatewayConfig, LLMConfig, StoreSettings


OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"
APP_TITLE = "Verdade na Lei BR"
APP_REFERER = "https://verdade-na-lei.lovable.app"

# gateway model ids
FAST_MODEL = "google/gemini-2.0-flash-001"
JSON_MODEL = "openai/gpt-4o-mini"


def is_gateway_configured() -> bool:
    """true when an OpenRouter key is present in the environment"""
    return bool(os.getenv("OPENROUTER_API_KEY", "").strip())


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    return int(raw)


def build_gateway_llm(model: str, temperature: Optional[float] = None) -> ChatOpenAI:
    """
    build a ChatOpenAI client pointed at OpenRouter.

    retries are disabled: a 429 must reach the caller as-is instead of being
    hidden behind client side backoff.

    args:
        model: OpenRouter model id, e.g. "openai/gpt-4o-mini"
        temperature: sampling temperature, provider default when None

    returns:
        configured ChatOpenAI instance
    """
    kwargs = {}
    if temperature is not None:
        kwargs["temperature"] = temperature

    return ChatOpenAI(
        model=model,
        api_key=os.getenv("OPENROUTER_API_KEY", ""),
        base_url=os.getenv("OPENROUTER_BASE_URL", OPENROUTER_BASE_URL),
        timeout=float(os.getenv("LLM_TIMEOUT_SECONDS", "60")),
        max_retries=0,
        default_headers={
            "HTTP-Referer": os.getenv("OPENROUTER_REFERER", APP_REFERER),
            "X-Title": os.getenv("OPENROUTER_APP_TITLE", APP_TITLE),
        },
        **kwargs
    )


def get_default_gateway_config() -> GatewayConfig:
    """
    create the GatewayConfig used by the endpoints.

    returns:
        GatewayConfig with one chat model per analysis

    example:
        >>> from verdade.config.default import get_default_gateway_config
        >>> config = get_default_gateway_config()
        >>> config.fact_check.llm.model_name
        'openai/gpt-4o-mini'
    """
    return GatewayConfig(
        # headline flows use the fast gemini model
        news_verification=LLMConfig(llm=build_gateway_llm(FAST_MODEL)),
        news_analysis=LLMConfig(llm=build_gateway_llm(FAST_MODEL)),
        legal_question=LLMConfig(llm=build_gateway_llm(FAST_MODEL)),
        # multimodal and strict json flows
        document_analysis=LLMConfig(llm=build_gateway_llm(JSON_MODEL)),
        fact_check=LLMConfig(llm=build_gateway_llm(JSON_MODEL, temperature=0.3)),
        transcription=LLMConfig(llm=build_gateway_llm(JSON_MODEL)),
    )


def get_feed_settings() -> FeedSettings:
    """
    read aggregation settings from FEED_* variables.

    example:
        >>> get_feed_settings().max_items
        15
    """
    return FeedSettings(
        timeout=float(os.getenv("FEED_TIMEOUT_SECONDS", "10")),
        max_items=int(os.getenv("FEED_MAX_ITEMS", "15")),
        max_items_per_source=_optional_int("FEED_MAX_ITEMS_PER_SOURCE"),
    )


def get_store_settings() -> StoreSettings:
    """read supabase credentials; the store is disabled when any is missing"""
    return StoreSettings(
        url=os.getenv("SUPABASE_URL") or None,
        service_role_key=os.getenv("SUPABASE_SERVICE_ROLE_KEY") or None,
    )
