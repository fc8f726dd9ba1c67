import httpx
import pytest

from clixmcp.errors import ApiError
from clixmcp.search.http import HttpFetcher


@pytest.mark.asyncio
async def test_fetch_text_sends_identifying_headers() -> None:
    seen: dict = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["user_agent"] = request.headers.get("User-Agent")
        seen["accept"] = request.headers.get("Accept")
        return httpx.Response(200, text="- [A](https://x/a.md): alpha")

    fetcher = HttpFetcher("clix-mcp-server/test", transport=httpx.MockTransport(handler))
    text = await fetcher.fetch_text("https://docs.clix.so/llms.txt", timeout=5)

    assert text == "- [A](https://x/a.md): alpha"
    assert seen == {
        "url": "https://docs.clix.so/llms.txt",
        "user_agent": "clix-mcp-server/test",
        "accept": "text/plain",
    }


@pytest.mark.asyncio
async def test_non_2xx_raises_api_error_with_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(429, text="slow down")

    fetcher = HttpFetcher("ua", transport=httpx.MockTransport(handler))

    with pytest.raises(ApiError) as exc_info:
        await fetcher.fetch_text("https://docs.clix.so/llms.txt", timeout=5)

    assert exc_info.value.status_code == 429
    assert "429" in str(exc_info.value)


@pytest.mark.asyncio
async def test_timeout_becomes_api_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    fetcher = HttpFetcher("ua", transport=httpx.MockTransport(handler))

    with pytest.raises(ApiError, match="Request timeout after 2s"):
        await fetcher.fetch_text("https://docs.clix.so/llms.txt", timeout=2)


@pytest.mark.asyncio
async def test_transport_error_becomes_api_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    fetcher = HttpFetcher("ua", transport=httpx.MockTransport(handler))

    with pytest.raises(ApiError, match="connection refused") as exc_info:
        await fetcher.fetch_text("https://docs.clix.so/llms.txt", timeout=2)

    assert exc_info.value.status_code is None


@pytest.mark.asyncio
async def test_follows_redirects() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/old.txt":
            return httpx.Response(301, headers={"Location": "https://docs.clix.so/new.txt"})
        return httpx.Response(200, text="moved")

    fetcher = HttpFetcher("ua", transport=httpx.MockTransport(handler))

    assert await fetcher.fetch_text("https://docs.clix.so/old.txt", timeout=2) == "moved"
