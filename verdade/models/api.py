from enum import Enum
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ===== VERDICT ENUMS =====
class NewsVerdict(str, Enum):
    """verdicts of verify-news, analyze-news and analyze-document"""
    CONFIRMED = "confirmed"
    MISLEADING = "misleading"
    FALSE = "false"
    UNVERIFIABLE = "unverifiable"


class FactCheckVerdict(str, Enum):
    """verdicts of the fact-check endpoint"""
    TRUE = "verdade"
    FALSE = "mentira"
    HALF_TRUE = "meia_verdade"
    INCONCLUSIVE = "inconclusivo"


class QuestionConfidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# ===== REQUEST MODELS =====
# required fields are optional here on purpose: a missing title must produce
# the endpoint's own portuguese 400 message, not a generic validation error
class NewsRequest(BaseModel):
    """headline sent by the news feed to verify-news and analyze-news"""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Governo anuncia fim do 13º salário para aposentados",
                "description": "Medida valeria a partir de 2027, segundo post viral.",
                "source": "Metrópoles",
                "link": "https://www.metropoles.com/brasil/exemplo",
                "category": "economia"
            }
        }
    )

    title: Optional[str] = None
    description: Optional[str] = None
    source: Optional[str] = None
    link: Optional[str] = None
    category: Optional[str] = None


class DocumentRequest(BaseModel):
    """text and/or image to analyze; imageBase64 takes precedence over imageUrl"""
    text: Optional[str] = None
    imageUrl: Optional[str] = None
    imageBase64: Optional[str] = None
    mode: Literal["news_tv", "document"] = "news_tv"


class FactCheckRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"claim": "O PIX vai ser taxado a partir do mês que vem", "inputType": "text"},
                {"claim": "https://www.exemplo.com.br/post-viral", "inputType": "link"}
            ]
        }
    )

    claim: Optional[str] = None
    inputType: Literal["text", "link"] = "text"


class QuestionRequest(BaseModel):
    question: Optional[str] = None
    category: Optional[str] = None


def _to_percentage(value):
    """accepts 0-1 fractions as well as 0-100 numbers from the model"""
    if isinstance(value, float) and 0 < value < 1:
        return round(value * 100)
    if isinstance(value, float):
        return round(value)
    return value


def _to_fraction(value):
    """accepts 0-100 percentages as well as 0-1 fractions from the model"""
    if isinstance(value, (int, float)) and not isinstance(value, bool) and 1 < value <= 100:
        return value / 100
    return value


# ===== AI RESULT MODELS =====
# extra keys returned by the model are kept so the client sees the full reply
class LawReference(BaseModel):
    model_config = ConfigDict(extra="allow")

    law: str = ""
    article: str = ""
    url: str = ""


class NewsVerification(BaseModel):
    model_config = ConfigDict(extra="allow")

    verdict: NewsVerdict = NewsVerdict.UNVERIFIABLE
    confidence: int = Field(default=50, ge=0, le=100)
    explanation: str = ""
    sources: List[str] = Field(default_factory=list)

    @field_validator("confidence", mode="before")
    @classmethod
    def _as_percentage(cls, value):
        return _to_percentage(value)


class VerificationSummary(BaseModel):
    model_config = ConfigDict(extra="allow")

    veredicto: NewsVerdict = NewsVerdict.UNVERIFIABLE
    confianca: int = Field(default=50, ge=0, le=100)
    explicacao: str = ""

    @field_validator("confianca", mode="before")
    @classmethod
    def _as_percentage(cls, value):
        return _to_percentage(value)


class NewsAnalysis(BaseModel):
    model_config = ConfigDict(extra="allow")

    resumo: str = ""
    contexto: str = ""
    pontosPrincipais: List[str] = Field(default_factory=list)
    analiseCritica: str = ""
    verificacao: VerificationSummary = Field(default_factory=VerificationSummary)
    fontesRecomendadas: List[str] = Field(default_factory=list)


class NewsData(BaseModel):
    title: str
    description: Optional[str] = None
    source: Optional[str] = None
    link: Optional[str] = None


class ClaimAssessment(BaseModel):
    model_config = ConfigDict(extra="allow")

    text: str
    verdict: NewsVerdict = NewsVerdict.UNVERIFIABLE
    explanation: str = ""
    sources: List[LawReference] = Field(default_factory=list)


class NewsTvAnalysis(BaseModel):
    model_config = ConfigDict(extra="allow")

    overallVerdict: NewsVerdict = NewsVerdict.UNVERIFIABLE
    summary: str = ""
    claims: List[ClaimAssessment] = Field(default_factory=list)


class KeyInfo(BaseModel):
    key: str
    value: str = ""


class RelatedLaw(BaseModel):
    model_config = ConfigDict(extra="allow")

    law: str
    article: str = ""
    relevance: str = ""


class DocumentAnalysis(BaseModel):
    model_config = ConfigDict(extra="allow")

    summary: str = ""
    keyInfo: List[KeyInfo] = Field(default_factory=list)
    legalPoints: List[str] = Field(default_factory=list)
    relatedLaws: List[RelatedLaw] = Field(default_factory=list)


class FactCheckSource(BaseModel):
    nome: str
    descricao: str = ""
    url: str = ""


class FactCheckResult(BaseModel):
    model_config = ConfigDict(extra="allow")

    postResumo: str = ""
    veredito: FactCheckVerdict = FactCheckVerdict.INCONCLUSIVE
    vereditoTitulo: str = ""
    explicacao: str = ""
    pontosChave: List[str] = Field(default_factory=list)
    fontes: List[FactCheckSource] = Field(default_factory=list)
    contexto: str = ""
    dataVerificacao: str = ""
    confianca: float = Field(default=0.3, ge=0, le=1)

    # some models answer 85 instead of 0.85
    @field_validator("confianca", mode="before")
    @classmethod
    def _as_fraction(cls, value):
        return _to_fraction(value)


class Transcription(BaseModel):
    model_config = ConfigDict(extra="allow")

    transcript: str = ""
    confidence: float = Field(default=0.8, ge=0, le=1)
    language: str = "pt-BR"
    duration_estimate: Optional[Union[str, float]] = None

    @field_validator("confidence", mode="before")
    @classmethod
    def _as_fraction(cls, value):
        return _to_fraction(value)


class LegalAnswer(BaseModel):
    model_config = ConfigDict(extra="allow")

    answer: str = ""
    sources: List[LawReference] = Field(default_factory=list)
    confidence: QuestionConfidence = QuestionConfidence.LOW
    category: str = "geral"
    followUp: Optional[str] = None
