"""
headline verification and in-depth news analysis.

both flows send the same headline block to the gateway and read a JSON reply;
malformed replies degrade to a default object instead of an error.
"""

from verdade.ai.gateway import ask_gateway
from verdade.ai.json_utils import parse_reply
from verdade.ai.prompts import NEWS_ANALYSIS_SYSTEM_PROMPT, NEWS_VERIFICATION_SYSTEM_PROMPT
from verdade.models.api import NewsAnalysis, NewsRequest, NewsVerdict, NewsVerification
from verdade.models.config import LLMConfig
from verdade.observability.logger import Stage, get_logger, time_profile


logger = get_logger(__name__, Stage.VERIFICATION)

VERIFICATION_FALLBACK_EXPLANATION = "Não foi possível analisar esta notícia automaticamente."


def build_news_prompt(news: NewsRequest, instruction: str) -> str:
    """
    format a headline for the gateway, skipping empty optional fields.

    example:
        >>> build_news_prompt(NewsRequest(title="Título", source="G1"), "Verifique.")
        'Analise esta notícia:\\n\\nTÍTULO: Título\\nFONTE: G1\\n\\nVerifique.'
    """
    lines = [f"TÍTULO: {news.title}"]
    if news.description:
        lines.append(f"DESCRIÇÃO: {news.description}")
    lines.append(f"FONTE: {news.source or 'desconhecida'}")
    if news.link:
        lines.append(f"LINK: {news.link}")

    return "Analise esta notícia:\n\n" + "\n".join(lines) + f"\n\n{instruction}"


def verification_fallback(reply: str) -> NewsVerification:
    return NewsVerification(
        verdict=NewsVerdict.UNVERIFIABLE,
        confidence=50,
        explanation=VERIFICATION_FALLBACK_EXPLANATION,
        sources=[],
    )


def analysis_fallback(reply: str) -> NewsAnalysis:
    # the raw reply is usually readable prose, show it as the summary
    return NewsAnalysis(resumo=reply)


@time_profile(Stage.VERIFICATION)
async def verify_news(news: NewsRequest, llm_config: LLMConfig) -> NewsVerification:
    """
    classify a headline as confirmed, misleading, false or unverifiable.

    args:
        news: headline with at least a title
        llm_config: chat model to use

    returns:
        NewsVerification, or the unverifiable fallback when the reply is malformed

    raises:
        GatewayError: when the gateway fails
    """
    logger.info(f"verifying headline: {news.title[:80]}")
    reply = await ask_gateway(
        llm_config,
        NEWS_VERIFICATION_SYSTEM_PROMPT,
        build_news_prompt(news, "Verifique a veracidade e responda com o JSON."),
    )
    return parse_reply(reply, NewsVerification, verification_fallback)


@time_profile(Stage.ANALYSIS)
async def analyze_news(news: NewsRequest, llm_config: LLMConfig) -> NewsAnalysis:
    """
    produce the full analysis (summary, context, key points, critique, verdict).

    raises:
        GatewayError: when the gateway fails
    """
    logger.info(f"analyzing headline: {news.title[:80]}")
    reply = await ask_gateway(
        llm_config,
        NEWS_ANALYSIS_SYSTEM_PROMPT,
        build_news_prompt(news, "Forneça uma análise completa em JSON."),
    )
    return parse_reply(reply, NewsAnalysis, analysis_fallback)
