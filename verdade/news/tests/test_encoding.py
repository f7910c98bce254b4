"""
tests for feed charset detection and decoding.
"""

from verdade.models.news import FeedEncoding
from verdade.news.encoding import (
    decode_feed,
    detect_encoding,
    extract_xml_declaration_encoding,
)


LATIN1_BODY = "<rss><item><title>Eleição em São Paulo</title></item></rss>".encode("iso-8859-1")
UTF8_BODY = "<rss><item><title>Eleição em São Paulo</title></item></rss>".encode("utf-8")


# ---- detect_encoding ----

def test_override_wins_over_everything():
    result = detect_encoding("text/xml; charset=utf-8", "UTF-8", UTF8_BODY, FeedEncoding.LATIN1)
    assert result == FeedEncoding.LATIN1


def test_content_type_latin1():
    assert detect_encoding("application/rss+xml; charset=ISO-8859-1", None, UTF8_BODY) == FeedEncoding.LATIN1
    assert detect_encoding("text/xml; charset=latin1", None, UTF8_BODY) == FeedEncoding.LATIN1


def test_xml_declaration_latin1():
    assert detect_encoding("text/xml", "iso-8859-1", UTF8_BODY) == FeedEncoding.LATIN1


def test_defaults_to_utf8_for_valid_utf8():
    assert detect_encoding("application/xml", None, UTF8_BODY) == FeedEncoding.UTF8
    assert detect_encoding(None, None, b"") == FeedEncoding.UTF8


def test_invalid_utf8_falls_back_to_latin1():
    assert detect_encoding("text/xml; charset=utf-8", None, LATIN1_BODY) == FeedEncoding.LATIN1


# ---- declaration ----

def test_extract_declaration():
    raw = b'<?xml version="1.0" encoding="ISO-8859-1"?>\n<rss version="0.91"></rss>'
    assert extract_xml_declaration_encoding(raw) == "ISO-8859-1"


def test_extract_declaration_single_quotes():
    raw = b"<?xml version='1.0' encoding='utf-8'?><rss/>"
    assert extract_xml_declaration_encoding(raw) == "utf-8"


def test_no_declaration():
    assert extract_xml_declaration_encoding(b"<rss></rss>") is None


# ---- decode_feed ----

def test_decode_latin1_body_without_hints_has_no_replacement_chars():
    text = decode_feed(LATIN1_BODY, content_type="text/xml")

    assert "\ufffd" not in text
    assert "Eleição em São Paulo" in text


def test_decode_declared_latin1():
    raw = b'<?xml version="1.0" encoding="ISO-8859-1"?>' + LATIN1_BODY
    assert "São Paulo" in decode_feed(raw)


def test_decode_utf8_body():
    assert "Eleição" in decode_feed(UTF8_BODY, content_type="application/rss+xml; charset=utf-8")


def test_decode_with_override():
    assert "São Paulo" in decode_feed(LATIN1_BODY, override=FeedEncoding.LATIN1)
