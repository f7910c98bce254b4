from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from langchain_core.language_models.chat_models import BaseChatModel


class LLMConfig(BaseModel):
    """configuration for one gateway call site, wrapping a langchain chat model"""
    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        json_schema_extra={
            "example": {
                "llm": "ChatOpenAI(model='google/gemini-2.0-flash-001', temperature=0.3)"
            }
        }
    )

    llm: BaseChatModel = Field(
        ...,
        description="langchain BaseChatModel instance pointed at the OpenRouter gateway"
    )


class GatewayConfig(BaseModel):
    """
    chat models used by each analysis.

    verification and analysis of headlines use a fast multimodal model, the
    fact-check uses a cheaper model with json output.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    news_verification: LLMConfig
    news_analysis: LLMConfig
    document_analysis: LLMConfig
    fact_check: LLMConfig
    transcription: LLMConfig
    legal_question: LLMConfig


class FeedSettings(BaseModel):
    """settings for the RSS aggregation"""
    model_config = ConfigDict(json_schema_extra={
        "example": {
            "timeout": 10.0,
            "max_items": 15,
            "max_items_per_source": None
        }
    })

    timeout: float = Field(default=10.0, gt=0, description="per feed request timeout in seconds")
    user_agent: str = Field(default="Mozilla/5.0 (compatible; NewsBot/1.0)")
    max_items: int = Field(default=15, gt=0, description="global cap applied after sorting")
    max_items_per_source: Optional[int] = Field(
        default=None,
        gt=0,
        description="optional cap per feed applied before merging; disabled when None"
    )


class StoreSettings(BaseModel):
    """credentials for the verification store (supabase rest api)"""
    url: Optional[str] = None
    service_role_key: Optional[str] = None
    table: str = "news_verifications"
    timeout: float = Field(default=10.0, gt=0)

    @property
    def configured(self) -> bool:
        return bool(self.url and self.service_role_key)
