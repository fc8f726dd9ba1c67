"""Shared implementation of the llms.txt catalog search tools."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any

from loguru import logger

from clixmcp.errors import ValidationError
from clixmcp.search.engine import DEFAULT_RESULTS, MAX_RESULTS, MIN_RESULTS, SearchEngine, SearchProfile
from clixmcp.search.formatter import render_report
from clixmcp.search.http import HttpFetcher, TextFetcher
from clixmcp.tools.base import Tool

if TYPE_CHECKING:
    from clixmcp.config.schema import ToolsConfig
    from clixmcp.context import ServerContext

MIN_QUERY_LENGTH = 2
MAX_QUERY_LENGTH = 200

QUERY_PARAMETER = {
    "type": "string",
    "minLength": MIN_QUERY_LENGTH,
    "maxLength": MAX_QUERY_LENGTH,
    "description": "Search query (2-200 characters)",
}
MAX_RESULTS_PARAMETER = {
    "type": "integer",
    "minimum": MIN_RESULTS,
    "maximum": MAX_RESULTS,
    "description": f"Number of results to return (default: {DEFAULT_RESULTS})",
}


def validate_query(query: Any) -> str:
    if not isinstance(query, str):
        raise ValidationError("query must be a string")
    if not MIN_QUERY_LENGTH <= len(query) <= MAX_QUERY_LENGTH:
        raise ValidationError(
            f"query must be between {MIN_QUERY_LENGTH} and {MAX_QUERY_LENGTH} characters "
            f"(got {len(query)})"
        )
    return query


def validate_max_results(value: Any) -> int:
    if value is None:
        return DEFAULT_RESULTS
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError("maxResults must be an integer")
    if not MIN_RESULTS <= value <= MAX_RESULTS:
        raise ValidationError(f"maxResults must be between {MIN_RESULTS} and {MAX_RESULTS}")
    return value


class CatalogSearchTool(Tool):
    """Search an llms.txt catalog and return fetched content for the best matches."""

    annotations = {"readOnlyHint": True, "openWorldHint": True}

    def __init__(
        self,
        context: ServerContext,
        tools_config: ToolsConfig | None = None,
        fetcher: TextFetcher | None = None,
    ):
        from clixmcp.config.schema import ToolsConfig

        self.context = context
        self.config = tools_config or ToolsConfig()
        self.fetcher = fetcher or HttpFetcher(self.config.fetch.user_agent)

    @abstractmethod
    def build_profile(self) -> SearchProfile:
        """Describe the catalog this tool searches."""

    def resolve_category(self, kwargs: dict[str, Any]) -> str | None:
        return None

    async def execute(self, query: str, **kwargs: Any) -> str:
        query = validate_query(query)
        max_results = validate_max_results(kwargs.get("maxResults"))
        category = self.resolve_category(kwargs)

        logger.info(
            "{}: query={!r} maxResults={} category={} client={}",
            self.name,
            query,
            max_results,
            category,
            self.context.client_id or "-",
        )

        profile = self.build_profile()
        engine = SearchEngine(
            profile,
            self.fetcher,
            fetch_config=self.config.fetch,
            ranking_config=self.config.ranking,
        )
        report = await engine.search(query, max_results=max_results, category=category)
        return render_report(report, profile)
