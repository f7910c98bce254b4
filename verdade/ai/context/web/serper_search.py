"""
serper.dev search client, used to give the fact-check recent web context.
"""

import os
from typing import Any, Dict, List

import httpx

from verdade.observability.logger import Stage, get_logger

logger = get_logger(__name__, Stage.WEB_SEARCH)

SERPER_API_URL = "https://google.serper.dev/search"


class SerperSearchError(Exception):
    """exception raised when serper.dev search api fails"""
    pass


def is_serper_configured() -> bool:
    """check whether a serper api key is available in the environment"""
    return bool(os.environ.get("SERPER_API_KEY", "").strip())


def build_serper_query(query: str) -> str:
    """collapse runs of whitespace, newlines included"""
    return " ".join(query.split())


async def serper_search(
    query: str,
    *,
    num: int = 5,
    timeout: float = 10.0,
) -> List[Dict[str, Any]]:
    """
    search the web through serper.dev, restricted to brazilian portuguese results.

    args:
        query: search query string
        num: number of results to return (1-10)
        timeout: request timeout in seconds

    returns:
        list of dicts with title, link, snippet and displayLink

    raises:
        SerperSearchError: when the key is missing, the api answers non-200
            or the body is not a JSON object
    """
    api_key = os.environ.get("SERPER_API_KEY", "").strip()
    if not api_key:
        raise SerperSearchError("missing SERPER_API_KEY")

    payload: Dict[str, Any] = {
        "q": build_serper_query(query),
        "num": max(1, min(num, 10)),
        "hl": "pt",
        "gl": "br",
    }

    headers = {
        "X-API-KEY": api_key,
        "Content-Type": "application/json",
    }

    async with httpx.AsyncClient(timeout=timeout) as client:
        response = await client.post(SERPER_API_URL, json=payload, headers=headers)

    if response.status_code != 200:
        raise SerperSearchError(
            f"serper search error: {response.status_code} {response.text[:200]}"
        )

    try:
        data = response.json()
    except ValueError as e:
        raise SerperSearchError(f"serper answered a non-JSON body: {response.text[:200]}") from e
    if not isinstance(data, dict):
        raise SerperSearchError(f"unexpected serper body: {type(data).__name__}")

    organic = data.get("organic") or []
    if not isinstance(organic, list):
        raise SerperSearchError(f"unexpected organic field: {type(organic).__name__}")
    logger.info(f"serper returned {len(organic)} result(s)")

    return [
        {
            "title": result.get("title", ""),
            "link": result.get("link", ""),
            "snippet": result.get("snippet", ""),
            "displayLink": result.get("domain", ""),
        }
        for result in organic
        if isinstance(result, dict)
    ]


def format_search_results(items: List[Dict[str, Any]]) -> str:
    """render search results as a numbered list for a prompt"""
    lines = []
    for index, item in enumerate(items, start=1):
        lines.append(f"{index}. {item['title']} ({item['link']})")
        if item.get("snippet"):
            lines.append(f"   {item['snippet']}")
    return "\n".join(lines)
