"""Search pipeline: resolve, rank, fetch, report."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from loguru import logger

from clixmcp.config.schema import FetchConfig, RankingConfig
from clixmcp.errors import ApiError
from clixmcp.search.catalog import CatalogResolver
from clixmcp.search.content import ContentFetcher
from clixmcp.search.http import TextFetcher
from clixmcp.search.models import SearchReport
from clixmcp.search.ranker import BM25Ranker

MIN_RESULTS = 1
MAX_RESULTS = 10
DEFAULT_RESULTS = 3


@dataclass(slots=True)
class SearchProfile:
    """Everything that differs between one catalog search tool and another."""

    index_url: str
    report_title: str
    result_noun: str
    category_label: str
    source_label: str
    footer_note: str
    languages: Mapping[str, str]
    default_language: str = "text"
    index_filename: str = "llms.txt"
    max_content_chars: int = 6000
    show_category_in_header: bool = False
    no_results_tips: tuple[str, ...] = ()
    category_from_url: Callable[[str], str | None] | None = None


def clamp_max_results(value: int | None) -> int:
    """Clamp a requested result count to the supported range."""
    if value is None:
        return DEFAULT_RESULTS
    return max(MIN_RESULTS, min(MAX_RESULTS, int(value)))


class SearchEngine:
    """Run one search end to end. Holds no state between calls."""

    def __init__(
        self,
        profile: SearchProfile,
        fetcher: TextFetcher,
        *,
        fetch_config: FetchConfig | None = None,
        ranking_config: RankingConfig | None = None,
    ):
        self.profile = profile
        self.fetcher = fetcher
        self.fetch_config = fetch_config or FetchConfig()
        self.ranking_config = ranking_config or RankingConfig()

    async def search(
        self,
        query: str,
        *,
        max_results: int | None = None,
        category: str | None = None,
    ) -> SearchReport:
        """
        Build a ``SearchReport`` for ``query``.

        Args:
            query: Validated search text.
            max_results: Number of entries to fetch, clamped to 1-10.
            category: Optional category filter; ``"all"`` or ``None`` keeps everything.

        Raises:
            ApiError: The root index could not be fetched, or resolving the
                catalog used up the whole ``overall_timeout``.
        """
        limit = clamp_max_results(max_results)
        loop = asyncio.get_running_loop()
        overall = self.fetch_config.overall_timeout
        deadline = loop.time() + overall

        resolver = CatalogResolver(
            self.fetcher,
            index_filename=self.profile.index_filename,
            request_timeout=self.fetch_config.request_timeout,
            category_from_url=self.profile.category_from_url,
        )
        try:
            async with asyncio.timeout_at(deadline):
                catalog = await resolver.resolve(self.profile.index_url, category=category)
        except TimeoutError as e:
            raise ApiError(
                f"Search exceeded the overall deadline of {overall:g}s while resolving {self.profile.index_url}."
            ) from e

        ranker = BM25Ranker(
            k1=self.ranking_config.k1,
            b=self.ranking_config.b,
            title_weight=self.ranking_config.title_weight,
            description_weight=self.ranking_config.description_weight,
        )
        ranked = ranker.rank(query, catalog.entries, limit=limit)
        logger.debug(
            "Query {!r}: {} candidates, {} selected",
            query,
            len(catalog.entries),
            len(ranked),
        )

        # Content fetches share whatever is left of the overall budget.
        remaining = max(deadline - loop.time(), 0.0)
        content = ContentFetcher(
            self.fetcher,
            max_chars=self.profile.max_content_chars,
            timeout=min(self.fetch_config.fetch_timeout, remaining),
            languages=self.profile.languages,
            default_language=self.profile.default_language,
        )
        results = await content.fetch_all(ranked)

        return SearchReport(
            query=query,
            candidate_count=len(catalog.entries),
            results=results,
            category=category,
            failed_sources=list(catalog.failed_sources),
        )
