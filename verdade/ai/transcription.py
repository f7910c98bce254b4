"""
speech to text through the multimodal gateway model.
"""

import base64
from typing import Optional

from verdade.ai.gateway import ask_gateway
from verdade.ai.json_utils import parse_reply
from verdade.ai.prompts import TRANSCRIPTION_SYSTEM_PROMPT
from verdade.models.api import Transcription
from verdade.models.config import LLMConfig
from verdade.observability.logger import Stage, get_logger, time_profile


logger = get_logger(__name__, Stage.TRANSCRIPTION)

SUPPORTED_AUDIO_FORMATS = ("webm", "mp3", "wav")
DEFAULT_AUDIO_FORMAT = "mp3"


def audio_format(content_type: Optional[str], filename: Optional[str] = None) -> str:
    """
    map an upload to one of the formats accepted by input_audio.

    example:
        >>> audio_format("audio/webm;codecs=opus")
        'webm'
        >>> audio_format("audio/ogg")
        'mp3'
    """
    hints = f"{content_type or ''} {filename or ''}".lower()
    for fmt in SUPPORTED_AUDIO_FORMATS:
        if fmt in hints:
            return fmt
    if "mpeg" in hints:
        return "mp3"
    return DEFAULT_AUDIO_FORMAT


def transcription_fallback(reply: str) -> Transcription:
    return Transcription(transcript=reply, confidence=0.8, language="pt-BR")


@time_profile(Stage.TRANSCRIPTION)
async def transcribe_audio(
    audio: bytes,
    llm_config: LLMConfig,
    *,
    content_type: Optional[str] = None,
    filename: Optional[str] = None,
) -> Transcription:
    """
    transcribe a brazilian portuguese recording.

    args:
        audio: raw bytes of the upload
        llm_config: audio capable chat model
        content_type: mime type sent by the browser
        filename: original file name, used as format hint

    returns:
        Transcription; a non-JSON reply is taken as the transcript itself

    raises:
        GatewayError: when the gateway fails
    """
    fmt = audio_format(content_type, filename)
    logger.info(f"transcribing {len(audio)} bytes of {fmt} audio")

    content = [
        {"type": "text", "text": "Transcreva este áudio em português brasileiro:"},
        {
            "type": "input_audio",
            "input_audio": {
                "data": base64.b64encode(audio).decode("ascii"),
                "format": fmt,
            },
        },
    ]

    reply = await ask_gateway(llm_config, TRANSCRIPTION_SYSTEM_PROMPT, content, json_mode=True)
    return parse_reply(reply, Transcription, transcription_fallback)
