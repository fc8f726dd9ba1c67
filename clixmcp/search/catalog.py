"""Resolve llms.txt indices into a flat catalog."""

from __future__ import annotations

import asyncio
import re
from collections.abc import Callable

from loguru import logger

from clixmcp.errors import ApiError
from clixmcp.search.http import TextFetcher
from clixmcp.search.models import Catalog, CatalogEntry

ALL_CATEGORIES = "all"

_HEADING_RE = re.compile(r"^\s{0,3}#{1,6}\s+(?P<text>.+?)\s*$")
_PLATFORM_RE = re.compile(r"^platform\s*:\s*(?P<name>.+)$", re.IGNORECASE)
_ENTRY_RE = re.compile(
    r"^\s*[-*+]\s+\[(?P<title>[^\]]+)\]\((?P<url>[^)\s]+)\)\s*(?::\s*(?P<description>.*))?$"
)
_LINK_RE = re.compile(r"\((?P<url>https?://[^\s)]+)\)")


def normalize_category(value: str) -> str:
    """Normalize a section or platform name for comparison."""
    return re.sub(r"\s+", "-", value.strip().lower())


def parse_index(
    text: str,
    *,
    category_from_url: Callable[[str], str | None] | None = None,
) -> list[CatalogEntry]:
    """
    Parse list-style llms.txt entries.

    Entries inherit the category of the closest heading above them. A
    ``# Platform: X`` heading yields ``x``; any other heading yields its
    normalized text. Entries before any heading fall back to
    ``category_from_url``.
    """
    entries: list[CatalogEntry] = []
    category: str | None = None

    for line in text.splitlines():
        heading = _HEADING_RE.match(line)
        if heading:
            label = heading.group("text")
            platform = _PLATFORM_RE.match(label)
            category = normalize_category(platform.group("name") if platform else label)
            continue

        match = _ENTRY_RE.match(line)
        if not match:
            continue

        url = match.group("url")
        entry_category = category
        if entry_category is None and category_from_url is not None:
            entry_category = category_from_url(url)

        entries.append(
            CatalogEntry(
                title=match.group("title").strip(),
                url=url,
                description=(match.group("description") or "").strip(),
                category=entry_category,
            )
        )
    return entries


def find_sub_indices(text: str, index_filename: str) -> list[str]:
    """Return unique links to further index documents, in document order."""
    suffix = "/" + index_filename.lower()
    urls: list[str] = []
    for match in _LINK_RE.finditer(text):
        url = match.group("url")
        if url.lower().endswith(suffix) and url not in urls:
            urls.append(url)
    return urls


class CatalogResolver:
    """Build a catalog from a root index, following a one-level mapping."""

    def __init__(
        self,
        fetcher: TextFetcher,
        *,
        index_filename: str = "llms.txt",
        request_timeout: float = 15.0,
        category_from_url: Callable[[str], str | None] | None = None,
    ):
        self.fetcher = fetcher
        self.index_filename = index_filename
        self.request_timeout = request_timeout
        self.category_from_url = category_from_url

    async def resolve(self, root_url: str, category: str | None = None) -> Catalog:
        """
        Fetch ``root_url`` and return its entries.

        Raises:
            ApiError: The root index could not be fetched.
        """
        root_text = await self._fetch_root(root_url)
        catalog = Catalog()

        sub_indices = [u for u in find_sub_indices(root_text, self.index_filename) if u != root_url]
        if sub_indices:
            logger.debug("Index {} maps to {} sub-indices", root_url, len(sub_indices))
            texts = await asyncio.gather(
                *(self._fetch_sub_index(url) for url in sub_indices)
            )
            for url, text in zip(sub_indices, texts):
                if text is None:
                    catalog.failed_sources.append(url)
                    continue
                self._extend(catalog, parse_index(text, category_from_url=self.category_from_url))
        else:
            self._extend(catalog, parse_index(root_text, category_from_url=self.category_from_url))

        if category and normalize_category(category) != ALL_CATEGORIES:
            wanted = normalize_category(category)
            catalog.entries = [e for e in catalog.entries if e.category == wanted]

        logger.debug(
            "Resolved {} catalog entries from {} (category={}, failed sources={})",
            len(catalog.entries),
            root_url,
            category or ALL_CATEGORIES,
            len(catalog.failed_sources),
        )
        return catalog

    async def _fetch_root(self, url: str) -> str:
        try:
            return await asyncio.wait_for(
                self.fetcher.fetch_text(url, timeout=self.request_timeout),
                timeout=self.request_timeout,
            )
        except asyncio.TimeoutError as e:
            raise ApiError(
                f"Request timeout after {self.request_timeout:g}s fetching index {url}."
            ) from e
        except ApiError:
            raise
        except Exception as e:
            raise ApiError(f"Failed to fetch index {url}: {e}") from e

    async def _fetch_sub_index(self, url: str) -> str | None:
        try:
            return await asyncio.wait_for(
                self.fetcher.fetch_text(url, timeout=self.request_timeout),
                timeout=self.request_timeout,
            )
        except asyncio.TimeoutError:
            logger.warning("Index {} timed out, skipping", url)
        except ApiError as e:
            logger.warning("Index {} unavailable, skipping: {}", url, e)
        except Exception as e:
            logger.warning("Index {} failed, skipping: {}: {}", url, type(e).__name__, e)
        return None

    @staticmethod
    def _extend(catalog: Catalog, entries: list[CatalogEntry]) -> None:
        seen = {e.url for e in catalog.entries}
        for entry in entries:
            if entry.url in seen:
                continue
            seen.add(entry.url)
            catalog.entries.append(entry)
