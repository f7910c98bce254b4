"""
charset detection for RSS payloads.

brazilian outlets serve either UTF-8 or ISO-8859-1, frequently with headers
that do not match the body. detection is a pure function of the response
metadata and bytes so it can be tested without network.
"""

import re
from typing import Optional

from verdade.models.news import FeedEncoding


LATIN1_ALIASES = ("iso-8859-1", "iso8859-1", "latin1", "latin-1")

_XML_DECLARATION_ENCODING = re.compile(
    rb"""<\?xml[^>]*?encoding\s*=\s*["']([A-Za-z0-9._-]+)["']""",
    re.IGNORECASE,
)

# the declaration must be at the very top, no need to scan the whole body
_DECLARATION_WINDOW = 512

REPLACEMENT_CHAR = "\ufffd"


def _names_latin1(value: Optional[str]) -> bool:
    if not value:
        return False
    lowered = value.lower()
    return any(alias in lowered for alias in LATIN1_ALIASES)


def extract_xml_declaration_encoding(raw: bytes) -> Optional[str]:
    """
    read the encoding declared in the <?xml ...?> prolog.

    args:
        raw: response body

    returns:
        declared encoding name, or None when there is no declaration

    example:
        >>> extract_xml_declaration_encoding(b'<?xml version="1.0" encoding="ISO-8859-1"?><rss/>')
        'ISO-8859-1'
    """
    match = _XML_DECLARATION_ENCODING.search(raw[:_DECLARATION_WINDOW])
    if not match:
        return None
    return match.group(1).decode("ascii")


def detect_encoding(
    content_type: Optional[str],
    xml_declaration: Optional[str],
    sample: bytes,
    override: Optional[FeedEncoding] = None,
) -> FeedEncoding:
    """
    decide how a feed body must be decoded.

    precedence: explicit per-feed override, then a Latin-1 charset in the
    Content-Type header, then a Latin-1 XML declaration. otherwise UTF-8,
    unless decoding the body as UTF-8 yields replacement characters.

    args:
        content_type: value of the Content-Type response header
        xml_declaration: encoding named in the XML prolog
        sample: raw body bytes
        override: encoding forced by the feed table

    returns:
        the encoding to use
    """
    if override is not None:
        return override

    if _names_latin1(content_type) or _names_latin1(xml_declaration):
        return FeedEncoding.LATIN1

    if REPLACEMENT_CHAR in sample.decode("utf-8", errors="replace"):
        return FeedEncoding.LATIN1

    return FeedEncoding.UTF8


def decode_feed(
    raw: bytes,
    content_type: Optional[str] = None,
    override: Optional[FeedEncoding] = None,
) -> str:
    """
    decode a feed body using detect_encoding().

    latin-1 maps every byte, so decoding never fails; UTF-8 bodies chosen by
    the header or declaration are decoded with replacement as a last resort.
    """
    encoding = detect_encoding(
        content_type,
        extract_xml_declaration_encoding(raw),
        raw,
        override,
    )
    return raw.decode(encoding.value, errors="replace")
