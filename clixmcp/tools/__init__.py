"""Agent tools exposed by clixmcp."""

from clixmcp.tools.base import Tool
from clixmcp.tools.factory import build_tool_registry
from clixmcp.tools.registry import ToolRegistry
from clixmcp.tools.search_docs import DocsSearchTool
from clixmcp.tools.search_sdk import SdkSearchTool

__all__ = ["DocsSearchTool", "SdkSearchTool", "Tool", "ToolRegistry", "build_tool_registry"]
