"""
tests for the serper.dev search client.

httpx.AsyncClient is patched at the module level; the client is used as an
async context manager so the mock is wired through __aenter__.
"""

from contextlib import contextmanager
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from verdade.ai.context.web.serper_search import (
    SERPER_API_URL,
    SerperSearchError,
    build_serper_query,
    format_search_results,
    is_serper_configured,
    serper_search,
)


@contextmanager
def _patched_client(response=None, side_effect=None):
    with patch("verdade.ai.context.web.serper_search.httpx.AsyncClient") as mock_client_cls:
        mock_client = AsyncMock()
        if side_effect is not None:
            mock_client.post.side_effect = side_effect
        else:
            mock_client.post.return_value = response
        mock_client_cls.return_value.__aenter__ = AsyncMock(return_value=mock_client)
        mock_client_cls.return_value.__aexit__ = AsyncMock(return_value=False)
        yield mock_client


def _response(status_code=200, payload=None, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload if payload is not None else {"organic": []}
    response.text = text
    return response


# ===== configuration and query building =====

def test_is_configured_when_key_set():
    with patch.dict("os.environ", {"SERPER_API_KEY": "test-key"}):
        assert is_serper_configured() is True


def test_is_not_configured_when_key_missing_or_blank():
    with patch.dict("os.environ", {}, clear=True):
        assert is_serper_configured() is False
    with patch.dict("os.environ", {"SERPER_API_KEY": "  "}):
        assert is_serper_configured() is False


def test_build_query_plain():
    assert build_serper_query("  pix   taxado ") == "pix taxado"


# ===== request mapping =====

@pytest.mark.asyncio
async def test_serper_search_payload_and_headers():
    with patch.dict("os.environ", {"SERPER_API_KEY": "my-secret-key"}):
        with _patched_client(_response()) as mock_client:
            await serper_search("reforma\n tributária", num=20)

    args, kwargs = mock_client.post.call_args
    assert args[0] == SERPER_API_URL
    assert kwargs["json"] == {
        "q": "reforma tributária",
        "num": 10,
        "hl": "pt",
        "gl": "br",
    }
    assert kwargs["headers"]["X-API-KEY"] == "my-secret-key"


# ===== response mapping =====

@pytest.mark.asyncio
async def test_serper_search_maps_organic_results():
    payload = {
        "organic": [
            {
                "title": "Receita desmente taxação do Pix",
                "link": "https://www.gov.br/receitafederal/pix",
                "snippet": "Não há cobrança de imposto sobre o Pix.",
                "domain": "gov.br",
                "position": 1,
            },
        ]
    }

    with patch.dict("os.environ", {"SERPER_API_KEY": "test-key"}):
        with _patched_client(_response(payload=payload)):
            items = await serper_search("pix taxado")

    assert items == [{
        "title": "Receita desmente taxação do Pix",
        "link": "https://www.gov.br/receitafederal/pix",
        "snippet": "Não há cobrança de imposto sobre o Pix.",
        "displayLink": "gov.br",
    }]


def test_format_search_results():
    text = format_search_results([
        {"title": "A", "link": "https://a.com.br", "snippet": "primeiro"},
        {"title": "B", "link": "https://b.com.br", "snippet": ""},
    ])

    assert text == "1. A (https://a.com.br)\n   primeiro\n2. B (https://b.com.br)"


# ===== error handling =====

@pytest.mark.asyncio
async def test_serper_search_missing_key():
    with patch.dict("os.environ", {}, clear=True):
        with pytest.raises(SerperSearchError, match="missing SERPER_API_KEY"):
            await serper_search("test")


@pytest.mark.asyncio
async def test_serper_search_non_200():
    with patch.dict("os.environ", {"SERPER_API_KEY": "test-key"}):
        with _patched_client(_response(status_code=429, text="rate limit exceeded")):
            with pytest.raises(SerperSearchError, match="429"):
                await serper_search("test")


@pytest.mark.asyncio
async def test_serper_search_timeout_propagates():
    with patch.dict("os.environ", {"SERPER_API_KEY": "test-key"}):
        with _patched_client(side_effect=httpx.TimeoutException("timed out")):
            with pytest.raises(httpx.TimeoutException):
                await serper_search("test")


_RealAsyncClient = httpx.AsyncClient


@contextmanager
def _mock_transport(handler):
    def build_client(*args, **kwargs):
        return _RealAsyncClient(transport=httpx.MockTransport(handler), **kwargs)

    with patch("verdade.ai.context.web.serper_search.httpx.AsyncClient", side_effect=build_client):
        yield


@pytest.mark.asyncio
async def test_serper_search_html_body_is_a_search_error():
    def handler(request):
        return httpx.Response(200, text="<html>proxy</html>")

    with patch.dict("os.environ", {"SERPER_API_KEY": "test-key"}):
        with _mock_transport(handler):
            with pytest.raises(SerperSearchError, match="non-JSON"):
                await serper_search("pix taxado")


@pytest.mark.asyncio
async def test_serper_search_json_list_body_is_a_search_error():
    def handler(request):
        return httpx.Response(200, json=[{"title": "x"}])

    with patch.dict("os.environ", {"SERPER_API_KEY": "test-key"}):
        with _mock_transport(handler):
            with pytest.raises(SerperSearchError, match="unexpected serper body"):
                await serper_search("pix taxado")


@pytest.mark.asyncio
async def test_serper_search_skips_malformed_results():
    def handler(request):
        return httpx.Response(200, json={"organic": ["lixo", {"title": "Ok", "link": "https://ok.com.br"}]})

    with patch.dict("os.environ", {"SERPER_API_KEY": "test-key"}):
        with _mock_transport(handler):
            items = await serper_search("pix taxado")

    assert [item["title"] for item in items] == ["Ok"]
