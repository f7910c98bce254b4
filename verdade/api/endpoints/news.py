from fastapi import APIRouter, Request
import time

from verdade.ai.gateway import GatewayError
from verdade.ai.news_analysis import analyze_news, verify_news
from verdade.api.errors import (
    FEED_FAILURE_MESSAGE,
    NOT_CONFIGURED_MESSAGE,
    UNEXPECTED_ERROR_MESSAGE,
    error_response,
    gateway_error_response,
)
from verdade.clients.verification_store import save_news_verification
from verdade.config.default import get_default_gateway_config, get_store_settings, is_gateway_configured
from verdade.models.api import NewsData, NewsRequest
from verdade.news.aggregator import aggregate_news
from verdade.observability.logger import Stage, get_request_logger
from verdade.utils.id_generator import generate_request_id

router = APIRouter()


async def _read_category(request: Request):
    """category from an optional JSON body; anything unreadable means no category"""
    try:
        payload = await request.json()
    except ValueError:
        return None
    if isinstance(payload, dict):
        return payload.get("category")
    return None


@router.post("/fetch-news")
async def fetch_news(request: Request):
    """
    latest headlines of a category, merged from all its RSS feeds.

    the body is optional; an unknown or missing category falls back to "geral".
    """
    request_id = generate_request_id()
    logger = get_request_logger(__name__, Stage.API_INTAKE, request_id)

    category = await _read_category(request)
    logger.info(f"received /fetch-news (category={category!r})")

    try:
        result = await aggregate_news(category)
    except Exception:
        logger.exception("news aggregation failed")
        return error_response(500, FEED_FAILURE_MESSAGE)

    return {
        "success": True,
        "news": [item.model_dump() for item in result.news],
        "category": result.category,
    }


@router.post("/verify-news")
async def verify_news_endpoint(news: NewsRequest):
    """quick verdict for a headline of the feed"""
    request_id = generate_request_id()
    logger = get_request_logger(__name__, Stage.API_INTAKE, request_id)

    if not news.title or not news.title.strip():
        return error_response(400, "Título da notícia é obrigatório")

    if not is_gateway_configured():
        logger.error("OPENROUTER_API_KEY is not configured")
        return error_response(500, NOT_CONFIGURED_MESSAGE)

    start_time = time.time()
    try:
        verification = await verify_news(news, get_default_gateway_config().news_verification)
    except GatewayError as e:
        logger.error(f"gateway failure: {e} (status={e.status_code})")
        return gateway_error_response(e)
    except Exception:
        logger.exception("unexpected error verifying news")
        return error_response(500, UNEXPECTED_ERROR_MESSAGE)

    logger.info(f"verdict {verification.verdict.value} in {(time.time() - start_time) * 1000:.0f}ms")
    return {"success": True, **verification.model_dump(mode="json")}


@router.post("/analyze-news")
async def analyze_news_endpoint(news: NewsRequest):
    """
    full analysis of a headline.

    the analysis is stored in news_verifications after a successful gateway
    reply; a failing insert does not change the response.
    """
    request_id = generate_request_id()
    logger = get_request_logger(__name__, Stage.API_INTAKE, request_id)

    if not news.title or not news.title.strip():
        return error_response(400, "Título é obrigatório")

    if not is_gateway_configured():
        logger.error("OPENROUTER_API_KEY is not configured")
        return error_response(500, NOT_CONFIGURED_MESSAGE)

    try:
        analysis = await analyze_news(news, get_default_gateway_config().news_analysis)
    except GatewayError as e:
        logger.error(f"gateway failure: {e} (status={e.status_code})")
        return gateway_error_response(e)
    except Exception:
        logger.exception("unexpected error analyzing news")
        return error_response(500, UNEXPECTED_ERROR_MESSAGE)

    await save_news_verification(news, analysis, get_store_settings())

    news_data = NewsData(
        title=news.title,
        description=news.description,
        source=news.source,
        link=news.link,
    )
    return {
        "success": True,
        "analysis": analysis.model_dump(mode="json"),
        "newsData": news_data.model_dump(),
    }
