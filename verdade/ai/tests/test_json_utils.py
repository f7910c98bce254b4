"""
tests for JSON extraction from model replies.
"""

from verdade.ai.json_utils import extract_json_object, parse_reply
from verdade.models.api import NewsVerdict, NewsVerification


def test_plain_json():
    assert extract_json_object('{"verdict": "confirmed", "confidence": 80}') == {
        "verdict": "confirmed",
        "confidence": 80,
    }


def test_json_inside_markdown_fence():
    reply = 'Aqui está:\n```json\n{"verdict": "false", "sources": ["CF/88"]}\n```'
    assert extract_json_object(reply) == {"verdict": "false", "sources": ["CF/88"]}


def test_not_json():
    assert extract_json_object("Não consegui analisar.") is None
    assert extract_json_object("") is None
    assert extract_json_object("{quebrado") is None


def test_top_level_array_is_rejected():
    assert extract_json_object('[{"verdict": "false"}]') is None


def test_parse_reply_validates():
    result = parse_reply(
        '{"verdict": "misleading", "confidence": 0.7, "explanation": "Exagero."}',
        NewsVerification,
        lambda raw: NewsVerification(explanation="fallback"),
    )

    assert result.verdict == NewsVerdict.MISLEADING
    assert result.confidence == 70
    assert result.explanation == "Exagero."


def test_parse_reply_uses_fallback_for_invalid_fields():
    result = parse_reply(
        '{"verdict": "talvez", "confidence": 10}',
        NewsVerification,
        lambda raw: NewsVerification(explanation=f"fallback: {raw[:5]}"),
    )

    assert result.explanation == "fallback: {\"ver"


def test_parse_reply_uses_fallback_for_prose():
    result = parse_reply("texto livre", NewsVerification, lambda raw: NewsVerification(explanation=raw))
    assert result.explanation == "texto livre"
