"""
best-effort persistence of news analyses in the supabase
"news_verifications" table, through its PostgREST endpoint.
"""

from typing import Optional

import httpx

from verdade.models.api import NewsAnalysis, NewsRequest
from verdade.models.config import StoreSettings
from verdade.observability.logger import Stage, get_logger

logger = get_logger(__name__, Stage.PERSISTENCE)


def build_verification_row(news: NewsRequest, analysis: NewsAnalysis) -> dict:
    """map an analyzed headline to the columns of news_verifications"""
    verification = analysis.verificacao
    return {
        "news_title": news.title,
        "news_description": news.description,
        "news_source": news.source,
        "news_link": news.link,
        "news_category": news.category or "geral",
        "verdict": verification.veredicto.value,
        "confidence": verification.confianca,
        "explanation": verification.explicacao,
        "resumo": analysis.resumo,
        "contexto": analysis.contexto,
        "pontos_principais": analysis.pontosPrincipais,
        "analise_critica": analysis.analiseCritica,
        "fontes_recomendadas": analysis.fontesRecomendadas,
    }


async def save_news_verification(
    news: NewsRequest,
    analysis: NewsAnalysis,
    settings: StoreSettings,
    client: Optional[httpx.AsyncClient] = None,
) -> bool:
    """
    insert one analysis row.

    failures are logged and reported through the return value only; the
    analysis has already been produced and is returned to the user anyway.

    returns:
        true when the row was stored
    """
    if not settings.configured:
        logger.debug("verification store not configured, skipping insert")
        return False

    url = f"{settings.url.rstrip('/')}/rest/v1/{settings.table}"
    headers = {
        "apikey": settings.service_role_key,
        "Authorization": f"Bearer {settings.service_role_key}",
        "Content-Type": "application/json",
        "Prefer": "return=minimal",
    }
    row = build_verification_row(news, analysis)

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=settings.timeout) as own_client:
                response = await own_client.post(url, json=row, headers=headers)
        else:
            response = await client.post(url, json=row, headers=headers)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        logger.error(f"insert rejected with {e.response.status_code}: {e.response.text[:200]}")
        return False
    except httpx.HTTPError:
        logger.exception("failed to reach verification store")
        return False

    logger.info(f"stored verification for '{news.title[:60]}'")
    return True
