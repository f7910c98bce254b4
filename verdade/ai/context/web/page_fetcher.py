"""
download a web page and reduce it to plain text for the fact-check prompt.
"""

from typing import Optional
from urllib.parse import urlparse

import httpx
from bs4 import BeautifulSoup
from pydantic import BaseModel

from verdade.observability.logger import Stage, get_logger

logger = get_logger(__name__, Stage.WEB_SEARCH)

PAGE_USER_AGENT = "Mozilla/5.0 (compatible; FactCheckBot/1.0)"
MAX_PAGE_CHARS = 8000


class PageFetchError(Exception):
    """raised when a submitted link cannot be downloaded or read"""
    pass


class PageContent(BaseModel):
    url: str
    title: str = ""
    text: str


def html_to_text(html: str, max_chars: int = MAX_PAGE_CHARS) -> tuple[str, str]:
    """
    strip scripts, styles and tags from an html document.

    args:
        html: raw html
        max_chars: maximum length of the returned text

    returns:
        tuple of (page title, whitespace-collapsed text)
    """
    soup = BeautifulSoup(html, "html.parser")
    for element in soup(["script", "style", "noscript", "iframe"]):
        element.decompose()

    title = ""
    if soup.title and soup.title.string:
        title = soup.title.string.strip()

    text = " ".join(soup.get_text(" ").split())
    return title, text[:max_chars]


async def fetch_page_text(
    url: str,
    *,
    client: Optional[httpx.AsyncClient] = None,
    timeout: float = 15.0,
    max_chars: int = MAX_PAGE_CHARS,
) -> PageContent:
    """
    download a page submitted by the user.

    args:
        url: absolute http(s) url
        client: optional client, mainly for tests
        timeout: request timeout in seconds
        max_chars: maximum length of the extracted text

    returns:
        PageContent with title and text

    raises:
        PageFetchError: invalid url, network failure, non-2xx status or empty page
    """
    try:
        parsed = urlparse(url.strip())
    except ValueError as e:
        raise PageFetchError(f"invalid url: {url!r}") from e
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise PageFetchError(f"invalid url: {url!r}")

    headers = {
        "User-Agent": PAGE_USER_AGENT,
        "Accept": "text/html,application/xhtml+xml,*/*;q=0.8",
        "Accept-Language": "pt-BR,pt;q=0.9",
    }

    try:
        if client is None:
            async with httpx.AsyncClient(follow_redirects=True, timeout=timeout) as own_client:
                response = await own_client.get(url.strip(), headers=headers)
        else:
            response = await client.get(url.strip(), headers=headers, follow_redirects=True, timeout=timeout)
        response.raise_for_status()
    except httpx.InvalidURL as e:
        logger.warning(f"link rejected by the http client: {url}")
        raise PageFetchError(f"invalid url: {url!r}") from e
    except httpx.HTTPStatusError as e:
        logger.warning(f"link answered {e.response.status_code}: {url}")
        raise PageFetchError(f"HTTP {e.response.status_code}") from e
    except httpx.HTTPError as e:
        logger.warning(f"could not reach link {url}: {type(e).__name__}")
        raise PageFetchError(str(e) or type(e).__name__) from e

    title, text = html_to_text(response.text, max_chars)
    if not text:
        raise PageFetchError("page has no readable text")

    logger.info(f"extracted {len(text)} chars from {parsed.netloc}")
    return PageContent(url=url.strip(), title=title, text=text)
