"""
helpers to read JSON out of model replies.
"""

import json
import re
from typing import Callable, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from verdade.observability.logger import Stage, get_logger

logger = get_logger(__name__, Stage.ANALYSIS)

ModelT = TypeVar("ModelT", bound=BaseModel)

# greedy on purpose: from the first "{" to the last "}"
_JSON_BLOCK = re.compile(r"\{[\s\S]*\}")


def extract_json_object(text: str) -> Optional[dict]:
    """
    parse a model reply as a JSON object.

    tries the whole reply first, then the outermost {...} block, which covers
    replies wrapped in markdown fences or preceded by prose.

    args:
        text: raw reply of the model

    returns:
        the parsed object, or None when no JSON object can be read

    example:
        >>> extract_json_object('```json\\n{"verdict": "false"}\\n```')
        {'verdict': 'false'}
    """
    if not text:
        return None

    candidates = [text.strip()]
    match = _JSON_BLOCK.search(text)
    if match:
        candidates.append(match.group(0))

    for candidate in candidates:
        try:
            parsed = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(parsed, dict):
            return parsed

    return None


def parse_reply(reply: str, model: Type[ModelT], fallback: Callable[[str], ModelT]) -> ModelT:
    """
    validate a model reply against a pydantic model.

    a reply that is not JSON, or whose JSON does not fit the model, is
    replaced by fallback(reply) instead of failing the request.

    args:
        reply: raw reply text
        model: pydantic model the JSON must satisfy
        fallback: builds the degraded result from the raw reply

    returns:
        the validated model or the fallback
    """
    data = extract_json_object(reply)
    if data is None:
        logger.warning(f"reply is not JSON, using {model.__name__} fallback")
        return fallback(reply)

    try:
        return model.model_validate(data)
    except ValidationError as e:
        logger.warning(f"reply does not fit {model.__name__} ({e.error_count()} error(s)), using fallback")
        return fallback(reply)
