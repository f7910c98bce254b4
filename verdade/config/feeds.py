"""
static table of RSS feeds per news category.

folha publishes its rss091 feeds in ISO-8859-1 without saying so in the
Content-Type header, so those entries force Latin-1.
"""

from typing import Dict, List, Optional

from verdade.models.news import FeedEncoding, FeedSource


DEFAULT_CATEGORY = "geral"

RSS_FEEDS: Dict[str, List[FeedSource]] = {
    "geral": [
        FeedSource(name="G1", url="https://g1.globo.com/rss/g1/"),
        FeedSource(name="Metrópoles", url="https://www.metropoles.com/feed"),
        FeedSource(name="Revista Oeste", url="https://revistaoeste.com/feed/"),
        FeedSource(
            name="Folha de S.Paulo",
            url="https://feeds.folha.uol.com.br/emcimadahora/rss091.xml",
            encoding=FeedEncoding.LATIN1,
        ),
    ],
    "politica": [
        FeedSource(name="G1 Política", url="https://g1.globo.com/rss/g1/politica/"),
        FeedSource(name="Metrópoles", url="https://www.metropoles.com/politica-brasil/feed"),
        FeedSource(name="Revista Oeste", url="https://revistaoeste.com/politica/feed/"),
        FeedSource(
            name="Folha Poder",
            url="https://feeds.folha.uol.com.br/poder/rss091.xml",
            encoding=FeedEncoding.LATIN1,
        ),
        FeedSource(name="Agência Senado", url="https://www12.senado.leg.br/noticias/feed"),
    ],
    "economia": [
        FeedSource(name="G1 Economia", url="https://g1.globo.com/rss/g1/economia/"),
        FeedSource(name="Metrópoles", url="https://www.metropoles.com/negocios/feed"),
        FeedSource(name="Revista Oeste", url="https://revistaoeste.com/economia/feed/"),
        FeedSource(
            name="Folha Mercado",
            url="https://feeds.folha.uol.com.br/mercado/rss091.xml",
            encoding=FeedEncoding.LATIN1,
        ),
    ],
    "esportes": [
        FeedSource(name="ge", url="https://ge.globo.com/rss/ge/"),
        FeedSource(name="Metrópoles", url="https://www.metropoles.com/esportes/feed"),
        FeedSource(name="Revista Oeste", url="https://revistaoeste.com/esporte/feed/"),
        FeedSource(
            name="Folha Esporte",
            url="https://feeds.folha.uol.com.br/esporte/rss091.xml",
            encoding=FeedEncoding.LATIN1,
        ),
        FeedSource(name="Lance!", url="https://www.lance.com.br/feed"),
    ],
}


def resolve_category(category: Optional[str]) -> str:
    """
    normalize a requested category, falling back to the default one.

    args:
        category: key sent by the client, may be None or unknown

    returns:
        a key present in RSS_FEEDS

    example:
        >>> resolve_category("Politica")
        'politica'
        >>> resolve_category("astrologia")
        'geral'
    """
    if not isinstance(category, str):
        return DEFAULT_CATEGORY

    key = category.strip().lower()
    return key if key in RSS_FEEDS else DEFAULT_CATEGORY


def get_category_feeds(category: Optional[str]) -> List[FeedSource]:
    """feeds configured for a category, or the default category's feeds"""
    return RSS_FEEDS[resolve_category(category)]
