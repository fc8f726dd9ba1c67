"""Tool registry factory."""

from clixmcp.config.schema import Config
from clixmcp.context import ServerContext
from clixmcp.search.http import TextFetcher
from clixmcp.tools.registry import ToolRegistry
from clixmcp.tools.search_docs import DocsSearchTool
from clixmcp.tools.search_sdk import SdkSearchTool


def build_tool_registry(
    config: Config,
    *,
    context: ServerContext | None = None,
    fetcher: TextFetcher | None = None,
) -> ToolRegistry:
    """Register every enabled search tool."""
    context = context or ServerContext.from_config(config)
    registry = ToolRegistry()

    if config.tools.docs.enabled:
        registry.register(DocsSearchTool(context, tools_config=config.tools, fetcher=fetcher))
    if config.tools.sdk.enabled:
        registry.register(SdkSearchTool(context, tools_config=config.tools, fetcher=fetcher))
    return registry
