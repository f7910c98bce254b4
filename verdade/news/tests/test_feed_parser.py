"""
tests for RSS item extraction and description cleanup.
"""

from bs4 import BeautifulSoup

from verdade.news.parser import clean_description, parse_feed_items, parse_item


def _rss(*items: str) -> str:
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<rss version="2.0"><channel><title>Feed</title>'
        + "".join(items)
        + "</channel></rss>"
    )


def _first_item(xml: str):
    return BeautifulSoup(xml, "xml").find("item")


# ---- clean_description ----

def test_clean_description_strips_tags():
    assert clean_description("<p>Texto com <b>negrito</b></p>") == "Texto com negrito"


def test_clean_description_inline_markup_does_not_split_words():
    assert clean_description("O <b>Bra</b>sil venceu, <i>diz</i> CBF.") == "O Brasil venceu, diz CBF."


def test_clean_description_decodes_double_escaped_entities():
    raw = "Tom &amp;amp; Jerry &amp;quot;citação&amp;quot; &amp;#39;x&amp;#39; &amp;nbsp;fim"
    assert clean_description(raw) == "Tom & Jerry \"citação\" 'x' fim"


def test_clean_description_removes_cdata_terminator():
    assert clean_description("texto solto]]>") == "texto solto"


def test_clean_description_truncates_to_200_chars():
    assert len(clean_description("a" * 500)) == 200


def test_clean_description_empty():
    assert clean_description("") == ""


# ---- parse_item ----

def test_parse_item_with_cdata():
    xml = _rss(
        "<item>"
        "<title><![CDATA[STF julga <b>marco temporal</b>]]></title>"
        "<link>https://g1.globo.com/politica/noticia/1.ghtml</link>"
        "<description><![CDATA[<img src='x.jpg'/><p>Julgamento &amp; votação</p>]]></description>"
        "<pubDate>Mon, 02 Mar 2026 14:30:00 -0300</pubDate>"
        "</item>"
    )

    item = parse_item(_first_item(xml), "G1")

    assert item is not None
    assert item.title == "STF julga <b>marco temporal</b>"
    assert item.link == "https://g1.globo.com/politica/noticia/1.ghtml"
    assert item.description == "Julgamento & votação"
    assert item.pubDate == "Mon, 02 Mar 2026 14:30:00 -0300"
    assert item.source == "G1"


def test_parse_item_without_link_is_dropped():
    xml = _rss("<item><title>Sem link</title><pubDate>Mon, 02 Mar 2026 10:00:00 GMT</pubDate></item>")
    assert parse_item(_first_item(xml), "G1") is None


def test_parse_item_without_title_is_dropped():
    xml = _rss("<item><link>https://exemplo.com.br/a</link></item>")
    assert parse_item(_first_item(xml), "G1") is None


def test_parse_item_missing_pub_date_defaults_to_now():
    xml = _rss("<item><title>Sem data</title><link>https://exemplo.com.br/a</link></item>")

    item = parse_item(_first_item(xml), "Oeste")

    assert item is not None
    assert item.pubDate.startswith("20")
    assert "T" in item.pubDate


# ---- parse_feed_items ----

def test_parse_feed_items_skips_invalid_items():
    xml = _rss(
        "<item><title>Um</title><link>https://exemplo.com.br/1</link></item>",
        "<item><title>Sem link</title></item>",
        "<item><title>Dois</title><link>https://exemplo.com.br/2</link></item>",
    )

    items = parse_feed_items(xml, "Metrópoles")

    assert [item.title for item in items] == ["Um", "Dois"]
    assert all(item.source == "Metrópoles" for item in items)


def test_parse_feed_items_respects_cap():
    xml = _rss(*(
        f"<item><title>Notícia {i}</title><link>https://exemplo.com.br/{i}</link></item>"
        for i in range(10)
    ))

    assert len(parse_feed_items(xml, "G1", max_items=3)) == 3
    assert len(parse_feed_items(xml, "G1")) == 10


def test_parse_feed_items_with_latin1_declaration_on_decoded_text():
    xml = (
        '<?xml version="1.0" encoding="ISO-8859-1"?>'
        "<rss><channel><item><title>Ação no Congresso</title>"
        "<link>https://folha.uol.com.br/poder/1</link></item></channel></rss>"
    )

    items = parse_feed_items(xml, "Folha Poder")

    assert len(items) == 1
    assert items[0].title == "Ação no Congresso"


def test_parse_feed_items_malformed_xml_does_not_raise():
    assert isinstance(parse_feed_items("<rss><channel><item><title>quebrado", "G1"), list)
    assert parse_feed_items("", "G1") == []
    assert parse_feed_items("isto não é xml", "G1") == []
