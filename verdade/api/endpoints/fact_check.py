from fastapi import APIRouter

from verdade.ai.context.web.page_fetcher import PageFetchError
from verdade.ai.fact_check import fact_check_claim
from verdade.ai.gateway import GatewayError
from verdade.api.errors import (
    NOT_CONFIGURED_MESSAGE,
    UNEXPECTED_ERROR_MESSAGE,
    error_response,
    gateway_error_response,
)
from verdade.config.default import get_default_gateway_config, is_gateway_configured
from verdade.models.api import FactCheckRequest
from verdade.observability.logger import Stage, get_request_logger
from verdade.utils.id_generator import generate_request_id

router = APIRouter()

LINK_UNREACHABLE_MESSAGE = "Não foi possível acessar o link fornecido"


@router.post("/fact-check")
async def fact_check(request: FactCheckRequest):
    """
    fact-check a claim, or the page behind a link when inputType is "link".
    """
    request_id = generate_request_id()
    logger = get_request_logger(__name__, Stage.API_INTAKE, request_id)

    if not request.claim or not request.claim.strip():
        return error_response(400, "Nenhuma afirmação fornecida", bare_client_errors=True)

    if not is_gateway_configured():
        logger.error("OPENROUTER_API_KEY is not configured")
        return error_response(500, NOT_CONFIGURED_MESSAGE)

    logger.info(f"received /fact-check ({request.inputType}, {len(request.claim)} chars)")

    try:
        result = await fact_check_claim(
            request.claim,
            request.inputType,
            get_default_gateway_config().fact_check,
        )
    except PageFetchError as e:
        logger.warning(f"link unreachable: {e}")
        return error_response(400, LINK_UNREACHABLE_MESSAGE, bare_client_errors=True)
    except GatewayError as e:
        logger.error(f"gateway failure: {e} (status={e.status_code})")
        return gateway_error_response(e, bare_client_errors=True)
    except Exception:
        logger.exception("unexpected error in fact-check")
        return error_response(500, UNEXPECTED_ERROR_MESSAGE)

    logger.info(f"verdict {result.veredito.value} (confianca={result.confianca})")
    return {"success": True, **result.model_dump(mode="json")}
