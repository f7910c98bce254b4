from fastapi import APIRouter

from verdade.ai.document_analysis import analyze_document, has_document_input
from verdade.ai.gateway import GatewayError
from verdade.api.errors import (
    NOT_CONFIGURED_MESSAGE,
    UNEXPECTED_ERROR_MESSAGE,
    error_response,
    gateway_error_response,
)
from verdade.config.default import get_default_gateway_config, is_gateway_configured
from verdade.models.api import DocumentRequest
from verdade.observability.logger import Stage, get_request_logger
from verdade.utils.id_generator import generate_request_id

router = APIRouter()


@router.post("/analyze-document")
async def analyze_document_endpoint(request: DocumentRequest):
    """legal check of a news excerpt (mode news_tv) or summary of a document (mode document)"""
    request_id = generate_request_id()
    logger = get_request_logger(__name__, Stage.API_INTAKE, request_id)

    if not has_document_input(request):
        return error_response(400, "Nenhum texto ou imagem fornecido para análise", bare_client_errors=True)

    if not is_gateway_configured():
        logger.error("OPENROUTER_API_KEY is not configured")
        return error_response(500, NOT_CONFIGURED_MESSAGE)

    logger.info(f"received /analyze-document (mode={request.mode})")

    try:
        analysis = await analyze_document(request, get_default_gateway_config().document_analysis)
    except GatewayError as e:
        logger.error(f"gateway failure: {e} (status={e.status_code})")
        return gateway_error_response(e, bare_client_errors=True)
    except Exception:
        logger.exception("unexpected error analyzing document")
        return error_response(500, UNEXPECTED_ERROR_MESSAGE)

    return {"success": True, "analysis": analysis.model_dump(mode="json")}
