from fastapi import APIRouter

from verdade.ai.gateway import GatewayError
from verdade.ai.legal_question import answer_legal_question
from verdade.api.errors import (
    NOT_CONFIGURED_MESSAGE,
    UNEXPECTED_ERROR_MESSAGE,
    error_response,
    gateway_error_response,
)
from verdade.config.default import get_default_gateway_config, is_gateway_configured
from verdade.models.api import QuestionRequest
from verdade.observability.logger import Stage, get_request_logger
from verdade.utils.id_generator import generate_request_id

router = APIRouter()


@router.post("/analyze-question")
async def analyze_question(request: QuestionRequest):
    """answer a question about brazilian law, citing articles"""
    request_id = generate_request_id()
    logger = get_request_logger(__name__, Stage.API_INTAKE, request_id)

    if not request.question or not request.question.strip():
        return error_response(400, "Nenhuma pergunta fornecida", bare_client_errors=True)

    if not is_gateway_configured():
        logger.error("OPENROUTER_API_KEY is not configured")
        return error_response(500, NOT_CONFIGURED_MESSAGE)

    logger.info(f"received /analyze-question (category={request.category!r})")

    try:
        answer = await answer_legal_question(
            request.question,
            get_default_gateway_config().legal_question,
            category=request.category,
        )
    except GatewayError as e:
        logger.error(f"gateway failure: {e} (status={e.status_code})")
        return gateway_error_response(e, bare_client_errors=True)
    except Exception:
        logger.exception("unexpected error answering question")
        return error_response(500, UNEXPECTED_ERROR_MESSAGE)

    return {"success": True, **answer.model_dump(mode="json", exclude_none=True)}
