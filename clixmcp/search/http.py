"""Text fetching over HTTP."""

from __future__ import annotations

from typing import Protocol

import httpx

from clixmcp.errors import ApiError


class TextFetcher(Protocol):
    """Anything that can download a URL as text."""

    async def fetch_text(self, url: str, *, timeout: float) -> str:
        """Return the body of ``url`` or raise ``ApiError``."""
        ...


class HttpFetcher:
    """``TextFetcher`` backed by httpx."""

    def __init__(
        self,
        user_agent: str,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.user_agent = user_agent
        self._transport = transport

    async def fetch_text(self, url: str, *, timeout: float) -> str:
        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                response = await client.get(
                    url,
                    headers={
                        "User-Agent": self.user_agent,
                        "Accept": "text/plain",
                    },
                    timeout=timeout,
                )
        except httpx.TimeoutException as e:
            raise ApiError(
                f"Request timeout after {timeout:g}s fetching {url}. "
                "The host may be slow or unreachable."
            ) from e
        except httpx.HTTPError as e:
            raise ApiError(f"Failed to fetch {url}: {e}") from e

        if not response.is_success:
            raise ApiError(
                f"Failed to fetch {url}: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )
        return response.text
