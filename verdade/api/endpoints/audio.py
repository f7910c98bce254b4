from typing import Optional

from fastapi import APIRouter, File, UploadFile

from verdade.ai.gateway import GatewayError
from verdade.ai.transcription import transcribe_audio
from verdade.api.errors import (
    NOT_CONFIGURED_MESSAGE,
    UNEXPECTED_ERROR_MESSAGE,
    error_response,
    gateway_error_response,
)
from verdade.config.default import get_default_gateway_config, is_gateway_configured
from verdade.observability.logger import Stage, get_request_logger
from verdade.utils.id_generator import generate_request_id

router = APIRouter()

NO_AUDIO_MESSAGE = "Nenhum arquivo de áudio fornecido"


@router.post("/transcribe-audio")
async def transcribe_audio_endpoint(audio: Optional[UploadFile] = File(None)):
    """transcribe the multipart field "audio" (webm, mp3 or wav)"""
    request_id = generate_request_id()
    logger = get_request_logger(__name__, Stage.API_INTAKE, request_id)

    if audio is None:
        return error_response(400, NO_AUDIO_MESSAGE, bare_client_errors=True)

    data = await audio.read()
    if not data:
        return error_response(400, NO_AUDIO_MESSAGE, bare_client_errors=True)

    if not is_gateway_configured():
        logger.error("OPENROUTER_API_KEY is not configured")
        return error_response(500, NOT_CONFIGURED_MESSAGE)

    logger.info(f"received /transcribe-audio ({audio.content_type}, {len(data)} bytes)")

    try:
        transcription = await transcribe_audio(
            data,
            get_default_gateway_config().transcription,
            content_type=audio.content_type,
            filename=audio.filename,
        )
    except GatewayError as e:
        logger.error(f"gateway failure: {e} (status={e.status_code})")
        return gateway_error_response(e, bare_client_errors=True)
    except Exception:
        logger.exception("unexpected error transcribing audio")
        return error_response(500, UNEXPECTED_ERROR_MESSAGE)

    return {"success": True, **transcription.model_dump(mode="json", exclude_none=True)}
