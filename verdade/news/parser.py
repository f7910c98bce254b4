"""
RSS item extraction.

parsing goes through BeautifulSoup with the lxml XML builder, which recovers
from the malformed markup some outlets publish (unescaped ampersands, stray
CDATA terminators) instead of failing the whole feed.
"""

import re
from datetime import datetime, timezone
from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from verdade.models.news import NewsItem
from verdade.observability.logger import Stage, get_logger


logger = get_logger(__name__, Stage.FEED_PARSE)

MAX_DESCRIPTION_LENGTH = 200

# entities that survive the html pass when feeds escape their markup twice.
# &amp; goes last so "&amp;lt;" is decoded only once
ENTITY_TABLE = (
    ("&nbsp;", " "),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&apos;", "'"),
    ("&#39;", "'"),
    ("&#x27;", "'"),
    ("&amp;", "&"),
)

_DECLARATION = re.compile(r"^\s*<\?xml[^>]*\?>", re.IGNORECASE)


def decode_entities(text: str) -> str:
    for entity, replacement in ENTITY_TABLE:
        text = text.replace(entity, replacement)
    return text


def clean_description(raw: str) -> str:
    """
    turn a feed description into short plain text.

    args:
        raw: description content, usually HTML inside CDATA

    returns:
        tag free, entity decoded text of at most 200 characters

    example:
        >>> clean_description("<p>Texto &amp;nbsp;com <b>HTML</b></p>]]>")
        'Texto com HTML'
    """
    if not raw:
        return ""

    text = BeautifulSoup(raw, "html.parser").get_text()
    text = decode_entities(text).replace("]]>", "")
    text = " ".join(text.split())
    return text[:MAX_DESCRIPTION_LENGTH].strip()


def _child_text(item: Tag, *names: str) -> Optional[str]:
    for name in names:
        child = item.find(name, recursive=False)
        if child is None:
            continue
        text = child.get_text().strip()
        if text:
            return text
    return None


def _item_link(item: Tag) -> Optional[str]:
    link = _child_text(item, "link")
    if link:
        return link

    tag = item.find("link", recursive=False)
    if tag is not None and tag.get("href"):
        return tag["href"].strip()
    return None


def parse_item(item: Tag, source: str) -> Optional[NewsItem]:
    """
    build a NewsItem from one <item> element.

    args:
        item: the <item> tag
        source: display name of the feed

    returns:
        the parsed item, or None when title or link is missing
    """
    title = _child_text(item, "title")
    link = _item_link(item)

    if not title or not link:
        return None

    description = _child_text(item, "description", "content:encoded") or ""
    pub_date = _child_text(item, "pubDate", "dc:date")
    if not pub_date:
        pub_date = datetime.now(timezone.utc).isoformat()

    return NewsItem(
        title=decode_entities(" ".join(title.split())),
        link=link,
        description=clean_description(description),
        pubDate=pub_date,
        source=source,
    )


def parse_feed_items(xml_text: str, source: str, max_items: Optional[int] = None) -> List[NewsItem]:
    """
    extract every valid item of an RSS document.

    the text is already decoded, so the XML declaration is dropped before
    parsing to keep the parser from re-applying its charset.

    args:
        xml_text: decoded RSS document
        source: display name of the feed
        max_items: optional cap on the number of items kept, in document order

    returns:
        items in document order; invalid items are skipped
    """
    if not xml_text or not xml_text.strip():
        return []

    soup = BeautifulSoup(_DECLARATION.sub("", xml_text, count=1), "xml")

    items: List[NewsItem] = []
    dropped = 0
    for element in soup.find_all("item"):
        parsed = parse_item(element, source)
        if parsed is None:
            dropped += 1
            continue
        items.append(parsed)
        if max_items is not None and len(items) >= max_items:
            break

    if dropped:
        logger.debug(f"{source}: dropped {dropped} item(s) without title or link")

    return items
