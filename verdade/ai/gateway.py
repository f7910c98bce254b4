"""
thin client for the OpenRouter chat completions gateway.

every analysis is a single request: system prompt plus user content in, the
model's text reply out. upstream failures are translated into GatewayError so
endpoints can pass 429 and 402 through to the browser.
"""

from typing import List, Union

import openai
from langchain_core.messages import HumanMessage, SystemMessage

from verdade.models.config import LLMConfig
from verdade.observability.logger import Stage, get_logger


logger = get_logger(__name__, Stage.ANALYSIS)

UserContent = Union[str, List[dict]]


class GatewayError(Exception):
    """
    failure reported by (or while reaching) the AI gateway.

    status_code is the upstream HTTP status, or None when the gateway could
    not be reached at all.
    """

    def __init__(self, message: str, status_code: Union[int, None] = None):
        super().__init__(message)
        self.status_code = status_code

    @property
    def rate_limited(self) -> bool:
        return self.status_code == 429

    @property
    def out_of_credits(self) -> bool:
        return self.status_code == 402


def _reply_text(content) -> str:
    if isinstance(content, str):
        return content
    # some providers answer with a list of content parts
    parts = []
    for part in content or []:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)


async def ask_gateway(
    llm_config: LLMConfig,
    system_prompt: str,
    user_content: UserContent,
    *,
    json_mode: bool = False,
) -> str:
    """
    send one chat completion and return the reply text.

    args:
        llm_config: chat model to use
        system_prompt: instructions for the model
        user_content: plain text, or a list of OpenAI content parts
            (text, image_url, input_audio) for multimodal requests
        json_mode: ask the provider for response_format json_object

    returns:
        the assistant message content

    raises:
        GatewayError: on any upstream HTTP error, connection failure or empty reply
    """
    llm = llm_config.llm
    if json_mode:
        llm = llm.bind(response_format={"type": "json_object"})

    messages = [
        SystemMessage(content=system_prompt),
        HumanMessage(content=user_content),
    ]

    try:
        response = await llm.ainvoke(messages)
    except openai.APIStatusError as e:
        logger.error(f"gateway answered {e.status_code}: {e.message}")
        raise GatewayError(f"AI gateway error: {e.status_code}", status_code=e.status_code) from e
    except (openai.APIConnectionError, openai.APITimeoutError) as e:
        logger.error(f"gateway unreachable: {type(e).__name__}: {e}")
        raise GatewayError("AI gateway unreachable") from e

    text = _reply_text(response.content).strip()
    if not text:
        raise GatewayError("No content in AI response")

    logger.debug(f"gateway reply with {len(text)} chars")
    return text
