"""Tool registry for dynamic tool management."""

from typing import Any

from loguru import logger

from clixmcp.errors import ClixMcpError, NotFoundError, ValidationError, format_error_for_user
from clixmcp.tools.base import Tool


class ToolRegistry:
    """
    Registry for agent tools.

    Allows dynamic registration and execution of tools.
    """

    def __init__(self):
        self._tools: dict[str, Tool] = {}

    def register(self, tool: Tool) -> None:
        """Register a tool."""
        self._tools[tool.name] = tool

    def unregister(self, name: str) -> None:
        """Unregister a tool by name."""
        self._tools.pop(name, None)

    def get(self, name: str) -> Tool | None:
        """Get a tool by name."""
        return self._tools.get(name)

    def has(self, name: str) -> bool:
        """Check if a tool is registered."""
        return name in self._tools

    def get_definitions(self) -> list[dict[str, Any]]:
        """Get all tool definitions in function-calling format."""
        return [tool.to_schema() for tool in self._tools.values()]

    async def execute(self, name: str, params: dict[str, Any]) -> str:
        """
        Execute a tool by name with given parameters.

        Errors never propagate; they are rendered with ``format_error_for_user``.

        Args:
            name: Tool name.
            params: Tool parameters.

        Returns:
            Tool execution result as string.
        """
        tool = self._tools.get(name)
        if not tool:
            return format_error_for_user(NotFoundError(f"Tool '{name}'"))

        errors = tool.validate_params(params)
        if errors:
            return format_error_for_user(
                ValidationError(f"Invalid parameters for tool '{name}': " + "; ".join(errors))
            )

        try:
            return await tool.execute(**params)
        except ClixMcpError as e:
            logger.error("Tool {} failed: {}", name, e)
            return format_error_for_user(e)
        except Exception as e:
            logger.exception("Unexpected error executing {}", name)
            return format_error_for_user(e)

    @property
    def tool_names(self) -> list[str]:
        """Get list of registered tool names."""
        return list(self._tools.keys())

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: str) -> bool:
        return name in self._tools
