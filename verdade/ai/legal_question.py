"""
answers to free-form questions about brazilian law.
"""

from typing import Optional

from verdade.ai.gateway import ask_gateway
from verdade.ai.json_utils import parse_reply
from verdade.ai.prompts import LEGAL_QUESTION_SYSTEM_PROMPT
from verdade.models.api import LegalAnswer, QuestionConfidence
from verdade.models.config import LLMConfig
from verdade.observability.logger import Stage, get_logger, time_profile


logger = get_logger(__name__, Stage.ANALYSIS)


def build_question_prompt(category: Optional[str]) -> str:
    """system prompt with the category hint; "auto" means no hint"""
    category_context = ""
    if category and category.strip() and category.strip().lower() != "auto":
        category_context = f"\nA pergunta é sobre {category.strip()}.\n"
    return LEGAL_QUESTION_SYSTEM_PROMPT.format(category_context=category_context)


@time_profile(Stage.ANALYSIS)
async def answer_legal_question(
    question: str,
    llm_config: LLMConfig,
    category: Optional[str] = None,
) -> LegalAnswer:
    """
    answer a question citing the laws and articles it relies on.

    raises:
        GatewayError: when the gateway fails
    """
    logger.info(f"answering question: {question[:100]}")
    reply = await ask_gateway(
        llm_config,
        build_question_prompt(category),
        question.strip(),
        json_mode=True,
    )
    return parse_reply(
        reply,
        LegalAnswer,
        lambda raw: LegalAnswer(answer=raw, confidence=QuestionConfidence.LOW, category="geral"),
    )
