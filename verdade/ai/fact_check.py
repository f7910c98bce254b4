"""
fact-check of a claim or of a link submitted by the user.

in link mode the page is downloaded and its text is checked instead of the
url. when SERPER_API_KEY is set, a web search adds recent context to the
prompt; a failing search never blocks the check.
"""

from datetime import date
from typing import Optional

import httpx

from verdade.ai.context.web.page_fetcher import fetch_page_text
from verdade.ai.context.web.serper_search import (
    SerperSearchError,
    format_search_results,
    is_serper_configured,
    serper_search,
)
from verdade.ai.gateway import ask_gateway
from verdade.ai.json_utils import parse_reply
from verdade.ai.prompts import FACT_CHECK_SEARCH_CONTEXT_HEADER, FACT_CHECK_SYSTEM_PROMPT
from verdade.models.api import FactCheckResult, FactCheckVerdict
from verdade.models.config import LLMConfig
from verdade.observability.logger import Stage, get_logger, time_profile


logger = get_logger(__name__, Stage.VERIFICATION)

# search engines ignore anything past a few dozen words
SEARCH_QUERY_MAX_CHARS = 200


def fact_check_fallback(claim: str, today: str):
    def build(reply: str) -> FactCheckResult:
        return FactCheckResult(
            postResumo=claim[:300],
            veredito=FactCheckVerdict.INCONCLUSIVE,
            vereditoTitulo="INCONCLUSIVO",
            explicacao=reply,
            dataVerificacao=today,
            confianca=0.3,
        )
    return build


async def gather_search_context(query: str) -> Optional[str]:
    """
    run the optional web search for a claim.

    returns:
        formatted results, or None when search is off, empty or failing
    """
    if not is_serper_configured():
        return None

    try:
        items = await serper_search(query[:SEARCH_QUERY_MAX_CHARS])
    except (SerperSearchError, httpx.HTTPError) as e:
        logger.warning(f"web search failed, checking without it: {type(e).__name__}: {e}")
        return None

    if not items:
        return None
    return format_search_results(items)


def build_fact_check_content(content: str, search_context: Optional[str]) -> str:
    text = f"Verifique esta afirmação/publicação:\n\n{content}"
    if search_context:
        text += f"\n\n{FACT_CHECK_SEARCH_CONTEXT_HEADER}\n{search_context}"
    return text


@time_profile(Stage.VERIFICATION)
async def fact_check_claim(
    claim: str,
    input_type: str,
    llm_config: LLMConfig,
    *,
    today: Optional[date] = None,
    page_client: Optional[httpx.AsyncClient] = None,
) -> FactCheckResult:
    """
    check a claim (or the content of a link) and return the structured verdict.

    args:
        claim: the statement, or a url when input_type is "link"
        input_type: "text" or "link"
        llm_config: chat model to use
        today: verification date, defaults to the current date
        page_client: optional http client for the link download

    returns:
        FactCheckResult; a malformed reply becomes an "inconclusivo" result

    raises:
        PageFetchError: when a link cannot be downloaded
        GatewayError: when the gateway fails
    """
    today_iso = (today or date.today()).isoformat()

    content = claim.strip()
    search_query = content
    if input_type == "link":
        page = await fetch_page_text(content, client=page_client)
        logger.info(f"fact-checking link {content} ({len(page.text)} chars)")
        content = page.text
        search_query = page.title or page.text
    else:
        logger.info(f"fact-checking claim: {content[:100]}")

    search_context = await gather_search_context(search_query)

    reply = await ask_gateway(
        llm_config,
        FACT_CHECK_SYSTEM_PROMPT.format(today=today_iso),
        build_fact_check_content(content, search_context),
        json_mode=True,
    )

    result = parse_reply(reply, FactCheckResult, fact_check_fallback(content, today_iso))
    if not result.dataVerificacao:
        result.dataVerificacao = today_iso
    return result
