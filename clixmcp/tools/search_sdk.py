"""SDK source code search tool."""

import re
from typing import Any

from clixmcp.errors import ValidationError
from clixmcp.search.catalog import ALL_CATEGORIES
from clixmcp.search.content import CODE_LANGUAGES, DOC_LANGUAGES
from clixmcp.search.engine import SearchProfile
from clixmcp.tools.catalog_search import MAX_RESULTS_PARAMETER, QUERY_PARAMETER, CatalogSearchTool
from clixmcp.tools.descriptions import SDK_SEARCH_DESCRIPTION

PLATFORMS = ("ios", "android", "flutter", "react-native")

_SDK_REPO_RE = re.compile(r"/clix-(?P<platform>ios|android|flutter|react-native)-sdk/", re.IGNORECASE)


def platform_from_url(url: str) -> str | None:
    """Infer the SDK platform from a clix-<platform>-sdk repository URL."""
    match = _SDK_REPO_RE.search(url)
    return match.group("platform").lower() if match else None


class SdkSearchTool(CatalogSearchTool):
    """Search Clix SDK source files listed in the per-platform llms.txt indices."""

    name = "search_sdk"
    description = SDK_SEARCH_DESCRIPTION
    parameters = {
        "type": "object",
        "properties": {
            "query": QUERY_PARAMETER,
            "platform": {
                "type": "string",
                "enum": [*PLATFORMS, ALL_CATEGORIES],
                "description": "SDK platform to search (default: all)",
            },
            "maxResults": MAX_RESULTS_PARAMETER,
        },
        "required": ["query"],
    }
    annotations = {"readOnlyHint": True, "openWorldHint": True, "title": "Clix SDK Search"}

    def resolve_category(self, kwargs: dict[str, Any]) -> str:
        platform = kwargs.get("platform") or ALL_CATEGORIES
        if platform not in (*PLATFORMS, ALL_CATEGORIES):
            raise ValidationError(
                f"platform must be one of {', '.join((*PLATFORMS, ALL_CATEGORIES))} (got {platform!r})"
            )
        return platform

    def build_profile(self) -> SearchProfile:
        return SearchProfile(
            index_url=self.config.sdk.index_url,
            report_title="Clix SDK Search Results",
            result_noun="source files",
            category_label="Platform",
            source_label="GitHub Source",
            languages={**DOC_LANGUAGES, **CODE_LANGUAGES},
            default_language="text",
            max_content_chars=self.config.sdk.max_content_chars,
            show_category_in_header=True,
            category_from_url=platform_from_url,
            footer_note=(
                "The source code above is fetched live from the Clix SDK repositories on GitHub. "
                "Open the source link for the complete file and its surrounding code."
            ),
            no_results_tips=(
                "Use class, method or feature names (e.g. \"NotificationService\", \"setUserId\")",
                "Set platform to `all` to search every SDK",
                "Try `search_docs` for guides and conceptual documentation",
            ),
        )
