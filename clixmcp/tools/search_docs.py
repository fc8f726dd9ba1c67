"""Documentation search tool."""

from clixmcp.search.content import CODE_LANGUAGES, DOC_LANGUAGES
from clixmcp.search.engine import SearchProfile
from clixmcp.tools.catalog_search import MAX_RESULTS_PARAMETER, QUERY_PARAMETER, CatalogSearchTool
from clixmcp.tools.descriptions import DOCS_SEARCH_DESCRIPTION


class DocsSearchTool(CatalogSearchTool):
    """Search the Clix documentation llms.txt index."""

    name = "search_docs"
    description = DOCS_SEARCH_DESCRIPTION
    parameters = {
        "type": "object",
        "properties": {
            "query": QUERY_PARAMETER,
            "maxResults": MAX_RESULTS_PARAMETER,
        },
        "required": ["query"],
    }
    annotations = {"readOnlyHint": True, "openWorldHint": True, "title": "Clix Docs Search"}

    def build_profile(self) -> SearchProfile:
        return SearchProfile(
            index_url=self.config.docs.index_url,
            report_title="Clix Documentation Search Results",
            result_noun="documentation pages",
            category_label="Section",
            source_label="Source",
            languages={**CODE_LANGUAGES, **DOC_LANGUAGES},
            default_language="markdown",
            max_content_chars=self.config.docs.max_content_chars,
            footer_note=(
                "Content above is fetched live from the Clix documentation. "
                "Follow the source links for the complete pages and related guides."
            ),
            no_results_tips=(
                "Use broader or different keywords (e.g. \"push notification\" instead of an error message)",
                "Check spelling of product and SDK names",
                "Try `search_sdk` when looking for a specific class or method",
            ),
        )
