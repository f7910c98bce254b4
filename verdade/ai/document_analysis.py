"""
analysis of news excerpts and documents, from text or an image.
"""

from typing import List, Union

from verdade.ai.gateway import ask_gateway
from verdade.ai.json_utils import parse_reply
from verdade.ai.prompts import DOCUMENT_SYSTEM_PROMPT, NEWS_TV_SYSTEM_PROMPT
from verdade.models.api import DocumentAnalysis, DocumentRequest, NewsTvAnalysis
from verdade.models.config import LLMConfig
from verdade.observability.logger import Stage, get_logger, time_profile


logger = get_logger(__name__, Stage.ANALYSIS)


def has_document_input(request: DocumentRequest) -> bool:
    return any(
        value and value.strip()
        for value in (request.text, request.imageUrl, request.imageBase64)
    )


def build_document_content(request: DocumentRequest) -> Union[str, List[dict]]:
    """
    build the user message: plain text, or text plus image parts.

    a base64 image is sent as a jpeg data url and wins over imageUrl.
    """
    if request.imageBase64 or request.imageUrl:
        image_source = (
            f"data:image/jpeg;base64,{request.imageBase64}"
            if request.imageBase64
            else request.imageUrl
        )
        instruction = request.text or "Extraia e analise o texto desta imagem."
        return [
            {
                "type": "text",
                "text": (
                    "Analise o seguinte conteúdo (extraia o texto da imagem se necessário "
                    f"e verifique as informações):\n\n{instruction}"
                ),
            },
            {"type": "image_url", "image_url": {"url": image_source}},
        ]

    return f"Analise o seguinte texto:\n\n{request.text}"


@time_profile(Stage.ANALYSIS)
async def analyze_document(
    request: DocumentRequest,
    llm_config: LLMConfig,
) -> Union[NewsTvAnalysis, DocumentAnalysis]:
    """
    check the legal claims of a news excerpt or summarize a document.

    args:
        request: text and/or image, and the analysis mode
        llm_config: multimodal chat model

    returns:
        NewsTvAnalysis for mode "news_tv", DocumentAnalysis for mode "document";
        a malformed reply becomes the raw text as summary

    raises:
        GatewayError: when the gateway fails
    """
    is_news = request.mode == "news_tv"
    logger.info(
        f"analyzing {'news excerpt' if is_news else 'document'} "
        f"(image={bool(request.imageUrl or request.imageBase64)})"
    )

    reply = await ask_gateway(
        llm_config,
        NEWS_TV_SYSTEM_PROMPT if is_news else DOCUMENT_SYSTEM_PROMPT,
        build_document_content(request),
        json_mode=True,
    )

    if is_news:
        return parse_reply(reply, NewsTvAnalysis, lambda raw: NewsTvAnalysis(summary=raw))
    return parse_reply(reply, DocumentAnalysis, lambda raw: DocumentAnalysis(summary=raw))
